"""
Pytest fixtures for the storefront suite.

Unit tests drive page objects against a mocked Playwright page, so they
need no browser. Live browser tests live in tests/e2e/.
"""
import os
import sys
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pages import PageDriver  # noqa: E402
from pages import driver as driver_module  # noqa: E402

TEST_BASE_URL = "https://shop.test"


@pytest.fixture
def mock_page():
    """A stand-in for playwright.sync_api.Page."""
    page = MagicMock(name="page")
    page.url = f"{TEST_BASE_URL}/"
    page.text_content.return_value = ""
    page.locator.return_value.all_inner_texts.return_value = []
    page.locator.return_value.count.return_value = 0
    return page


@pytest.fixture
def mock_expect(monkeypatch):
    """Replace playwright's expect() inside the driver with a recorder."""
    recorder = MagicMock(name="expect")
    monkeypatch.setattr(driver_module, "expect", recorder)
    return recorder


@pytest.fixture
def driver(mock_page, tmp_path):
    """PageDriver bound to the mocked page."""
    return PageDriver(mock_page, TEST_BASE_URL, artifacts_dir=tmp_path / "artifacts")
