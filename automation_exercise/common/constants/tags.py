"""
Test tags for categorization and execution filtering.

Each tag is a registered pytest marker, so suites can be selected with
``pytest -m smoke`` or ``pytest -m "api and not regression"``.

Usage:
    from automation_exercise.common.constants.tags import SMOKE, UI, tagged

    @tagged(SMOKE, UI)
    async def test_login(home_page):
        ...
"""

from typing import Callable, Tuple

# Test priority levels
SMOKE = "smoke"
REGRESSION = "regression"

# Test categories
UI = "ui"
API = "api"

# Performance
PERFORMANCE = "performance"
LOAD = "load"

# Needs the real site (browser or network)
LIVE = "live"

TAGS = {
    "SMOKE": SMOKE,
    "REGRESSION": REGRESSION,
    "UI": UI,
    "API": API,
    "PERFORMANCE": PERFORMANCE,
    "LOAD": LOAD,
    "LIVE": LIVE,
}

SUITE_TAGS = {
    "SMOKE_UI": (SMOKE, UI),
    "SMOKE_API": (SMOKE, API),
    "REGRESSION_UI": (REGRESSION, UI),
    "REGRESSION_API": (REGRESSION, API),
}

MARKER_DESCRIPTIONS = {
    SMOKE: "fast checks of the critical paths",
    REGRESSION: "broader regression coverage",
    UI: "browser driven tests",
    API: "tests against the public REST API",
    PERFORMANCE: "performance measurements",
    LOAD: "load tests",
    LIVE: "requires the real site; skipped unless --live or RUN_LIVE_TESTS=true",
}


def tagged(*tags: str) -> Callable:
    """
    Apply one pytest marker per tag to a test function or class.

    pytest is only needed once the decorator is applied.
    """
    unknown = [tag for tag in tags if tag not in MARKER_DESCRIPTIONS]
    if unknown:
        raise ValueError(f"Unknown test tags: {unknown}")

    def decorator(obj):
        import pytest

        for tag in tags:
            obj = getattr(pytest.mark, tag)(obj)
        return obj

    return decorator


def suite(name: str) -> Tuple[str, ...]:
    """Return the tags of a predefined suite, e.g. suite('SMOKE_API')."""
    return SUITE_TAGS[name]
