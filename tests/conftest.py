"""Pytest configuration and fixtures for nodeplate tests."""

import pytest

from nodeplate import Script, make_component, tag


@pytest.fixture
def alert_template():
    """Alert box: id, conditional class, title leaf and a child marker."""
    return tag(
        "div",
        {
            "id": "{{id}}",
            "class": "alert ${{{type}} === 'error' ? 'alert-danger' : 'alert-info'}",
            "role": "alert",
            "data-dismissible": "{{dismissible}}",
        },
        tag("strong", None, "{{title}}"),
        "{{children}}",
    )


@pytest.fixture
def alert_defaults():
    """Defaults covering every name the alert template references."""
    return {"id": "alert-main", "type": "info", "title": "Notice", "dismissible": False}


@pytest.fixture
def alert(alert_template, alert_defaults):
    """Alert component with a deferred script referencing its id."""
    return make_component(
        alert_template,
        Script("() => document.getElementById({{id}}).classList.add('shown')"),
        alert_defaults,
    )


def assert_contains(result: str, *expected_parts: str) -> None:
    """Assert rendered output contains all expected parts.

    Args:
        result: The rendered output.
        expected_parts: Strings that should all be present in the result.
    """
    for part in expected_parts:
        assert part in result, (
            f"Rendered output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {result!r}"
        )
