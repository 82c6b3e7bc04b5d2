from __future__ import annotations

import json
import os
import platform
import sys
from pathlib import Path

import pytest

from nodeplate import Component, Script, make_component, tag

try:
    import importlib.metadata as importlib_metadata
except ModuleNotFoundError:  # pragma: no cover
    import importlib_metadata  # type: ignore


BASE_DIR = Path(__file__).resolve().parent
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"
BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "nodeplate": _version("nodeplate"),
    }


@pytest.fixture(scope="session", autouse=True)
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture(scope="session")
def button() -> Component:
    """Small component: mixed attribute text, one expression, one text leaf."""
    return make_component(
        tag(
            "button",
            {
                "id": "{{id}}",
                "class": "btn btn-{{variant}} ${{{outline}} ? 'btn-outline' : ''}",
                "disabled": "{{disabled}}",
            },
            "{{label}}",
        ),
        defaults={"variant": "primary", "outline": False, "disabled": False, "label": "OK"},
    )


@pytest.fixture(scope="session")
def card() -> Component:
    """Medium component: nested ternaries, a child marker and a script."""
    return make_component(
        tag(
            "div",
            {
                "id": "{{id}}",
                "class": "card ${{{elevated}} ? ({{size}} === 'lg' ? 'shadow-lg' : 'shadow') : ''}",
                "data-config": "{{config}}",
            },
            tag(
                "div",
                {"class": "card-header", "style": "display: ${'{{title}}'.trim() ? 'block' : 'none'}"},
                tag("h3", None, "{{title}}"),
            ),
            tag("div", {"class": "card-body"}, "{{children}}"),
        ),
        Script("() => initCard({{id}}, {{config}})"),
        defaults={
            "elevated": True,
            "size": "lg",
            "title": "Card",
            "config": {"collapsible": True, "tags": ["a", "b", "c"]},
        },
    )


@pytest.fixture(scope="session")
def row_values() -> list[dict[str, object]]:
    return [
        {"id": f"row-{i}", "label": f"Item {i}", "outline": i % 2 == 0, "variant": "secondary"}
        for i in range(100)
    ]
