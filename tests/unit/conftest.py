"""Mocked Playwright handles for the unit tests; no browser is started."""

from unittest.mock import AsyncMock, MagicMock, PropertyMock

import pytest
from playwright.async_api import Keyboard, Locator, Mouse, Page

from automation_exercise.ui.base.ui_base import UIBase


def make_locator(**async_results) -> MagicMock:
    """Locator mock whose async methods are AsyncMocks; kwargs set return values."""
    locator = MagicMock(spec=Locator)
    for name, value in async_results.items():
        getattr(locator, name).return_value = value
    return locator


def make_group(*candidates) -> MagicMock:
    """Locator standing for several elements: count() and nth() follow ``candidates``."""
    group = make_locator(count=len(candidates))
    group.nth.side_effect = lambda index: candidates[index]
    return group


@pytest.fixture
def page() -> MagicMock:
    page = MagicMock(spec=Page)
    page.mouse = MagicMock(spec=Mouse)
    page.keyboard = MagicMock(spec=Keyboard)
    page.url = "https://www.automationexercise.com/"
    return page


@pytest.fixture
def ui(page) -> UIBase:
    ui = UIBase(page)
    ui.pause = AsyncMock()
    return ui


@pytest.fixture
def locator_factory():
    return make_locator


@pytest.fixture
def group_factory():
    return make_group


def make_tree_locator() -> MagicMock:
    """
    Locator mock whose derived locators (first, nth, locator, filter) are
    locator mocks too, created on first use and then reused.
    """
    locator = make_locator()
    children = {}

    def child(key):
        if key not in children:
            children[key] = make_tree_locator()
        return children[key]

    type(locator).first = PropertyMock(side_effect=lambda: child("first"))
    locator.nth.side_effect = lambda index: child(("nth", index))
    locator.locator.side_effect = lambda selector, **kwargs: child(("locator", selector))
    locator.filter.side_effect = lambda **kwargs: child(("filter", tuple(sorted(kwargs.items()))))
    return locator


@pytest.fixture
def tree_page(page) -> MagicMock:
    """Page mock whose page.locator(selector) returns one tree locator per selector."""
    locators = {}

    def locate(selector, **kwargs):
        if selector not in locators:
            locators[selector] = make_tree_locator()
        return locators[selector]

    page.locator.side_effect = locate
    return page
