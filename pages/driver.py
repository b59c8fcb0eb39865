"""
Page Driver

Generic element interactions shared by every page object. Page objects
hold a PageDriver rather than inheriting from one.
"""
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union

from playwright.sync_api import Locator, Page, expect

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.saucedemo.com"


class PageDriver:
    """Thin wrapper over a Playwright page bound to a base URL."""

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        artifacts_dir: Optional[Union[str, Path]] = None,
    ):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.artifacts_dir = Path(artifacts_dir) if artifacts_dir else Path("artifacts")

    @classmethod
    def from_settings(cls, page: Page, settings) -> "PageDriver":
        """Create a driver using E2ESettings."""
        return cls(page, settings.base_url, settings.artifacts_dir)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}{path}"
        logger.debug(f"goto {url}")
        self.page.goto(url)

    def reload(self) -> None:
        self.page.reload()

    def go_back(self) -> None:
        self.page.go_back()

    def go_forward(self) -> None:
        self.page.go_forward()

    def current_url(self) -> str:
        return self.page.url

    def wait_for_url(self, url_pattern: str, timeout: int = None) -> None:
        """Wait for URL to match a glob pattern or regex string."""
        self.page.wait_for_url(url_pattern, timeout=timeout)

    # =========================================================================
    # Element Interaction
    # =========================================================================

    def click(self, selector: str, timeout: int = None) -> None:
        logger.debug(f"click {selector}")
        self.page.click(selector, timeout=timeout)

    def double_click(self, selector: str) -> None:
        self.page.dblclick(selector)

    def right_click(self, selector: str) -> None:
        self.page.click(selector, button="right")

    def hover(self, selector: str) -> None:
        self.page.hover(selector)

    def fill(self, selector: str, value: str) -> None:
        """Fill an input field, replacing its content."""
        logger.debug(f"fill {selector}")
        self.page.fill(selector, value)

    def type(self, selector: str, value: str, delay: int = 50) -> None:
        """Type text character by character."""
        self.locator(selector).press_sequentially(value, delay=delay)

    def clear(self, selector: str) -> None:
        self.page.fill(selector, "")

    def clear_and_fill(self, selector: str, value: str) -> None:
        self.clear(selector)
        self.fill(selector, value)

    def select(self, selector: str, value: str) -> List[str]:
        """Select a dropdown option by value or label."""
        logger.debug(f"select {value!r} in {selector}")
        return self.page.select_option(selector, value)

    def check(self, selector: str) -> None:
        self.page.check(selector)

    def uncheck(self, selector: str) -> None:
        self.page.uncheck(selector)

    def toggle(self, selector: str) -> None:
        """Flip a checkbox."""
        if self.is_checked(selector):
            self.uncheck(selector)
        else:
            self.check(selector)

    def focus(self, selector: str) -> None:
        self.page.focus(selector)

    def blur(self, selector: str) -> None:
        self.locator(selector).blur()

    def press_key(self, key: str) -> None:
        """Press a key on the focused element (e.g. 'Enter', 'Escape')."""
        self.page.keyboard.press(key)

    def scroll_into_view(self, selector: str) -> None:
        self.locator(selector).scroll_into_view_if_needed()

    def scroll_to_top(self) -> None:
        self.page.evaluate("window.scrollTo(0, 0)")

    def scroll_to_bottom(self) -> None:
        self.page.evaluate("window.scrollTo(0, document.body.scrollHeight)")

    def upload_file(self, selector: str, file_path: Union[str, Path]) -> None:
        self.page.set_input_files(selector, str(file_path))

    # =========================================================================
    # Element State
    # =========================================================================

    def is_visible(self, selector: str) -> bool:
        return self.page.is_visible(selector)

    def is_enabled(self, selector: str) -> bool:
        return self.page.is_enabled(selector)

    def is_checked(self, selector: str) -> bool:
        return self.page.is_checked(selector)

    def get_text(self, selector: str) -> str:
        """Get element text content."""
        return self.page.text_content(selector) or ""

    def get_value(self, selector: str) -> str:
        return self.page.input_value(selector)

    def get_attribute(self, selector: str, attribute: str) -> Optional[str]:
        return self.page.get_attribute(selector, attribute)

    def count(self, selector: str) -> int:
        """Count matching elements."""
        return self.locator(selector).count()

    def all_texts(self, selector: str) -> List[str]:
        """Rendered text of every matching element, in document order."""
        texts = self.locator(selector).all_inner_texts()
        logger.debug(f"captured {len(texts)} text(s) from {selector}")
        return texts

    def css_property(self, selector: str, prop: str) -> str:
        """Computed CSS property of the first matching element."""
        return self.locator(selector).first.evaluate(
            "(el, prop) => getComputedStyle(el).getPropertyValue(prop)", prop
        )

    def evaluate(self, script: str, arg: Any = None) -> Any:
        """Run JavaScript in the page."""
        return self.page.evaluate(script, arg)

    # =========================================================================
    # Locators
    # =========================================================================

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def get_by_test_id(self, test_id: str) -> Locator:
        """Get element by data-test attribute."""
        return self.page.get_by_test_id(test_id)

    def get_by_role(self, role: str, **kwargs) -> Locator:
        return self.page.get_by_role(role, **kwargs)

    def get_by_text(self, text: str, exact: bool = False) -> Locator:
        return self.page.get_by_text(text, exact=exact)

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_for_selector(self, selector: str, state: str = "visible", timeout: int = None):
        """Wait for element to reach state."""
        return self.page.wait_for_selector(selector, state=state, timeout=timeout)

    def wait_for_hidden(self, selector: str, timeout: int = None) -> None:
        self.page.wait_for_selector(selector, state="detached", timeout=timeout)

    def wait_for_load_state(self, state: str = "load") -> None:
        self.page.wait_for_load_state(state)

    def wait(self, milliseconds: int) -> None:
        """Wait for specified time (use sparingly)."""
        self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_visible(self, selector: str) -> None:
        expect(self.locator(selector)).to_be_visible()

    def expect_hidden(self, selector: str) -> None:
        expect(self.locator(selector)).to_be_hidden()

    def expect_text(self, selector: str, text: str) -> None:
        """Assert element contains text."""
        expect(self.locator(selector)).to_contain_text(text)

    def expect_exact_text(self, selector: str, text: str) -> None:
        expect(self.locator(selector)).to_have_text(text)

    def expect_value(self, selector: str, value: str) -> None:
        expect(self.locator(selector)).to_have_value(value)

    def expect_attribute(self, selector: str, attribute: str, value: str) -> None:
        expect(self.locator(selector)).to_have_attribute(attribute, value)

    def expect_class(self, selector: str, class_name: str) -> None:
        expect(self.locator(selector)).to_have_class(re.compile(rf"\b{re.escape(class_name)}\b"))

    def expect_no_class(self, selector: str, class_name: str) -> None:
        expect(self.locator(selector)).not_to_have_class(
            re.compile(rf"\b{re.escape(class_name)}\b")
        )

    def expect_enabled(self, selector: str) -> None:
        expect(self.locator(selector)).to_be_enabled()

    def expect_disabled(self, selector: str) -> None:
        expect(self.locator(selector)).to_be_disabled()

    def expect_checked(self, selector: str) -> None:
        expect(self.locator(selector)).to_be_checked()

    def expect_unchecked(self, selector: str) -> None:
        expect(self.locator(selector)).not_to_be_checked()

    def expect_count(self, selector: str, count: int) -> None:
        expect(self.locator(selector)).to_have_count(count)

    def expect_url(self, pattern: str) -> None:
        """Assert URL matches a regex pattern."""
        expect(self.page).to_have_url(re.compile(pattern))

    def expect_url_equals(self, url: str) -> None:
        expect(self.page).to_have_url(url)

    def expect_title(self, title: str) -> None:
        expect(self.page).to_have_title(title)

    # =========================================================================
    # Screenshots and Debugging
    # =========================================================================

    def screenshot(self, name: str, full_page: bool = False) -> Path:
        """Save a timestamped screenshot into the artifacts directory."""
        self.artifacts_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_name = re.sub(r"[^\w.-]+", "_", name)
        path = self.artifacts_dir / f"{safe_name}_{timestamp}.png"
        self.page.screenshot(path=str(path), full_page=full_page)
        logger.info(f"Screenshot saved: {path}")
        return path
