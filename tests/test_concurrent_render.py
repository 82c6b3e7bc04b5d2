"""Concurrent rendering: shared components, distinct minted ids.

Components and templates are read-only, so many threads may render the
same component at once. The only shared state is the id counter.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from nodeplate import make_component, next_id, render_html, tag

WORKERS = 8
RENDERS_PER_WORKER = 200


class TestConcurrentIds:
    def test_next_id_unique_across_threads(self):
        barrier = threading.Barrier(WORKERS)

        def worker() -> list[str]:
            barrier.wait()
            return [next_id() for _ in range(RENDERS_PER_WORKER)]

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            batches = [f.result() for f in [pool.submit(worker) for _ in range(WORKERS)]]

        ids = [i for batch in batches for i in batch]
        assert len(set(ids)) == WORKERS * RENDERS_PER_WORKER

    def test_minted_ids_unique_across_renders(self):
        box = make_component(tag("div", {"id": "{{id}}"}, "{{children}}"))
        barrier = threading.Barrier(WORKERS)

        def worker() -> list[str]:
            barrier.wait()
            return [box().attrs["id"] for _ in range(RENDERS_PER_WORKER)]

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            batches = list(pool.map(lambda _: worker(), range(WORKERS)))

        ids = [i for batch in batches for i in batch]
        assert len(set(ids)) == len(ids)


class TestConcurrentRender:
    def test_same_output_from_every_thread(self, alert):
        expected = render_html(alert({"type": "error", "title": "Oops"}, "Disk full"))

        def worker(_: int) -> str:
            return render_html(alert({"type": "error", "title": "Oops"}, "Disk full"))

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(worker, range(WORKERS * 10)))

        assert all(result == expected for result in results)

    def test_template_untouched(self, alert, alert_template):
        def worker(n: int) -> None:
            alert({"title": f"t{n}", "type": "error" if n % 2 else "info"})

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            list(pool.map(worker, range(WORKERS * 10)))

        assert alert.template == alert_template
