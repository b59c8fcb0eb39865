"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing with Playwright.
"""
import logging
from typing import Any, Dict, Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from actions import InventoryActions, LoginActions
from config import Credentials, load_settings, load_users
from pages import CartPage, InventoryPage, LoginPage, MenuComponent, PageDriver, ProductDetailPage

# =============================================================================
# Configuration
# =============================================================================

SETTINGS = load_settings()

PACKAGE_LOGGERS = ("actions", "config", "pages", "verification")


def pytest_configure(config):
    """Apply suite settings to logging and the browser choice."""
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(SETTINGS.log_level)

    # --browser on the command line wins over E2E_BROWSER / config
    if hasattr(config.option, "browser") and not config.option.browser:
        config.option.browser = [SETTINGS.browser]


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(pytestconfig) -> Dict[str, Any]:
    """Browser launch arguments."""
    headed = pytestconfig.getoption("headed", default=False)
    return {
        "headless": SETTINGS.headless and not headed,
        "slow_mo": SETTINGS.slow_mo,
    }


@pytest.fixture(scope="session")
def browser_context_args() -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        "base_url": SETTINGS.base_url,
        "viewport": dict(SETTINGS.viewport),
        "ignore_https_errors": True,
    }

    if SETTINGS.record_video:
        SETTINGS.artifacts_dir.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(SETTINGS.artifacts_dir / "videos")

    return args


@pytest.fixture
def context(browser: Browser, browser_context_args: Dict) -> Generator[BrowserContext, None, None]:
    """Fresh context per test, so cookies and storage never leak between tests."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(SETTINGS.default_timeout)
    context.set_default_navigation_timeout(SETTINGS.navigation_timeout)

    yield context

    context.close()


@pytest.fixture
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """Create a new page for each test."""
    page = context.new_page()

    yield page

    page.close()


@pytest.fixture
def driver(page: Page) -> PageDriver:
    return PageDriver.from_settings(page, SETTINGS)


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def login_page(driver: PageDriver) -> LoginPage:
    return LoginPage(driver)


@pytest.fixture
def inventory_page(driver: PageDriver) -> InventoryPage:
    return InventoryPage(driver)


@pytest.fixture
def detail_page(driver: PageDriver) -> ProductDetailPage:
    return ProductDetailPage(driver)


@pytest.fixture
def cart_page(driver: PageDriver) -> CartPage:
    return CartPage(driver)


@pytest.fixture
def menu(driver: PageDriver) -> MenuComponent:
    return MenuComponent(driver)


@pytest.fixture
def login_actions(login_page: LoginPage) -> LoginActions:
    return LoginActions(login_page)


@pytest.fixture
def inventory_actions(
    inventory_page: InventoryPage, detail_page: ProductDetailPage, cart_page: CartPage
) -> InventoryActions:
    return InventoryActions(inventory_page, detail_page, cart_page)


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def users() -> Dict[str, Credentials]:
    return load_users()


@pytest.fixture
def logged_in(login_actions: LoginActions, inventory_page: InventoryPage, users) -> InventoryPage:
    """Return the inventory page after signing in as the standard user."""
    login_actions.login_as(users["validUser"])
    inventory_page.expect_loaded()
    return inventory_page


# =============================================================================
# Failure Artifacts
# =============================================================================


@pytest.fixture(autouse=True)
def screenshot_on_failure(request, driver: PageDriver):
    """Capture screenshot on test failure."""
    yield

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and SETTINGS.screenshot_on_failure:
        driver.screenshot(f"failed-{request.node.name}")


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
