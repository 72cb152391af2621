"""
Shared pytest fixtures.

- Live gating: tests marked ``live`` drive the real site and only run with
  ``--live`` or RUN_LIVE_TESTS=true.
- Browser fixtures: Playwright (async API) browser, context and page.
- Page objects and the API client, injected by name:

    @pytest.mark.asyncio
    async def test_search(products_page):
        await products_page.goto()
        await products_page.search("top")
"""

import asyncio
import sys
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import APIRequestContext, Browser, BrowserContext, Page, async_playwright

from automation_exercise.api.clients.automation_exercise_api_client import AutomationExerciseApiClient
from automation_exercise.common.config import Config
from automation_exercise.common.constants.tags import LIVE, MARKER_DESCRIPTIONS
from automation_exercise.common.errors import EnvironmentConfigurationError
from automation_exercise.common.utils.environment import get_validated_environment, init_url
from automation_exercise.common.utils.logger import setup_logger
from automation_exercise.ui.pages.home_page import HomePage
from automation_exercise.ui.pages.login_page import LoginPage
from automation_exercise.ui.pages.products_page import ProductsPage
from automation_exercise.ui.pages.signup_page import SignupPage

# Playwright spawns the browser as a subprocess; on Windows that needs the Proactor loop
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run tests marked 'live' against the real site",
    )


def pytest_configure(config):
    # an unknown ENVIRONMENT stops the run before any test is collected
    try:
        get_validated_environment()
    except EnvironmentConfigurationError as e:
        raise pytest.UsageError(str(e)) from e

    for marker, description in MARKER_DESCRIPTIONS.items():
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live") or Config.RUN_LIVE_TESTS:
        return
    skip_live = pytest.mark.skip(reason="live test: pass --live or set RUN_LIVE_TESTS=true")
    for item in items:
        if LIVE in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session", autouse=True)
def suite_logger():
    return setup_logger("automation_exercise")


# =============================================================================
# Browser fixtures
# =============================================================================


@pytest_asyncio.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    async with async_playwright() as playwright:
        browser_type = getattr(playwright, Config.BROWSER)
        browser = await browser_type.launch(headless=Config.HEADLESS, slow_mo=Config.SLOW_MO)
        yield browser
        await browser.close()


@pytest_asyncio.fixture
async def context(browser: Browser) -> AsyncGenerator[BrowserContext, None]:
    context = await browser.new_context(viewport=Config.VIEWPORT, base_url=init_url().ui)
    context.set_default_timeout(Config.ACTION_TIMEOUT)
    context.set_default_navigation_timeout(Config.NAVIGATION_TIMEOUT)
    yield context
    await context.close()


@pytest_asyncio.fixture
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    page = await context.new_page()
    yield page
    await page.close()


# =============================================================================
# Page objects
# =============================================================================


@pytest.fixture
def home_page(page: Page) -> HomePage:
    return HomePage(page)


@pytest.fixture
def products_page(page: Page) -> ProductsPage:
    return ProductsPage(page)


@pytest.fixture
def signup_login_page(page: Page) -> LoginPage:
    return LoginPage(page)


@pytest.fixture
def signup_page(page: Page) -> SignupPage:
    return SignupPage(page)


# =============================================================================
# API
# =============================================================================


@pytest_asyncio.fixture
async def api_request_context() -> AsyncGenerator[APIRequestContext, None]:
    async with async_playwright() as playwright:
        request_context = await playwright.request.new_context(timeout=Config.ACTION_TIMEOUT)
        yield request_context
        await request_context.dispose()


@pytest.fixture
def api_client(api_request_context: APIRequestContext) -> AutomationExerciseApiClient:
    return AutomationExerciseApiClient(api_request_context)
