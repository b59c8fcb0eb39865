"""
Inventory Page Object

Product listing: sorting, cart buttons and the cart badge.
"""
import logging
from typing import List, Union

from verification import SortKey, SortSpec, Verdict, assert_sorted, verify_order

from .driver import PageDriver

logger = logging.getLogger(__name__)


class InventoryPage:
    """Page object for the product listing."""

    # Selectors
    INVENTORY_CONTAINER = ".inventory_container"
    INVENTORY_ITEM = ".inventory_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"
    ITEM_DESC = ".inventory_item_desc"
    ITEM_IMG = ".inventory_item_img img"
    ADD_TO_CART_BUTTON = 'button[id^="add-to-cart"]'
    REMOVE_BUTTON = 'button[id^="remove"]'
    SHOPPING_CART_LINK = ".shopping_cart_link"
    SHOPPING_CART_BADGE = ".shopping_cart_badge"
    SORT_SELECT = ".product_sort_container"

    PATH = "/inventory.html"

    def __init__(self, driver: PageDriver):
        self.driver = driver

    def navigate(self) -> "InventoryPage":
        self.driver.goto(self.PATH)
        return self

    # =========================================================================
    # Reading
    # =========================================================================

    def product_count(self) -> int:
        return self.driver.count(self.INVENTORY_ITEM)

    def product_names(self) -> List[str]:
        """Product names in display order."""
        return self.driver.all_texts(self.ITEM_NAME)

    def product_prices(self) -> List[str]:
        """Product prices in display order, as rendered ('$29.99')."""
        return self.driver.all_texts(self.ITEM_PRICE)

    def cart_count(self) -> int:
        """Number shown on the cart badge, 0 when there is no badge."""
        if self.driver.count(self.SHOPPING_CART_BADGE) == 0:
            return 0
        text = self.driver.get_text(self.SHOPPING_CART_BADGE).strip()
        try:
            return int(text)
        except ValueError:
            logger.warning(f"Unexpected cart badge text: {text!r}")
            raise

    # =========================================================================
    # Interaction
    # =========================================================================

    def add_first_to_cart(self) -> None:
        self.driver.locator(self.INVENTORY_ITEM).first.locator(self.ADD_TO_CART_BUTTON).click()

    def add_to_cart_by_index(self, index: int) -> None:
        self.driver.locator(self.INVENTORY_ITEM).nth(index).locator(self.ADD_TO_CART_BUTTON).click()

    def add_to_cart_by_name(self, name: str) -> None:
        """Click the add button of the product whose name is exactly `name`."""
        item = self.driver.locator(self.INVENTORY_ITEM).filter(
            has=self.driver.get_by_text(name, exact=True)
        )
        if item.count() == 0:
            raise LookupError(f"No product named {name!r} on the inventory page")
        logger.debug(f"Adding {name!r} to cart")
        item.first.locator(self.ADD_TO_CART_BUTTON).click()

    def remove_first_from_cart(self) -> None:
        self.driver.locator(self.INVENTORY_ITEM).first.locator(self.REMOVE_BUTTON).click()

    def open_first_product(self) -> None:
        self.driver.locator(self.ITEM_NAME).first.click()

    def open_cart(self) -> None:
        self.driver.click(self.SHOPPING_CART_LINK)

    def sort_by(self, spec: Union[SortSpec, str]) -> None:
        """Choose an ordering from the sort dropdown."""
        option = spec.option if isinstance(spec, SortSpec) else spec
        logger.info(f"Sorting products by {option}")
        self.driver.select(self.SORT_SELECT, option)

    # =========================================================================
    # Ordering
    # =========================================================================

    def _texts_for(self, spec: SortSpec) -> List[str]:
        if spec.key == SortKey.PRICE:
            return self.product_prices()
        return self.product_names()

    def ordering_verdict(self, spec: SortSpec) -> Verdict:
        """Capture the listing and check it against spec without asserting."""
        return verify_order(self._texts_for(spec), spec)

    def verify_sorted(self, spec: SortSpec) -> Verdict:
        """Assert the listing is ordered according to spec."""
        return assert_sorted(self._texts_for(spec), spec)

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_loaded(self) -> None:
        self.driver.expect_visible(self.INVENTORY_CONTAINER)
        self.driver.expect_visible(f"{self.INVENTORY_ITEM} >> nth=0")

    def expect_product_count(self, count: int) -> None:
        self.driver.expect_count(self.INVENTORY_ITEM, count)

    def expect_names_visible(self) -> None:
        self.driver.expect_visible(f"{self.ITEM_NAME} >> nth=0")

    def expect_prices_visible(self) -> None:
        self.driver.expect_visible(f"{self.ITEM_PRICE} >> nth=0")

    def expect_first_description_visible(self) -> None:
        self.driver.expect_visible(f"{self.ITEM_DESC} >> nth=0")

    def expect_first_image_visible(self) -> None:
        self.driver.expect_visible(f"{self.ITEM_IMG} >> nth=0")

    def expect_cart_badge_count(self, count: int) -> None:
        self.driver.expect_exact_text(self.SHOPPING_CART_BADGE, str(count))

    def expect_cart_badge_absent(self) -> None:
        self.driver.expect_count(self.SHOPPING_CART_BADGE, 0)

    def expect_first_button_text(self, text: str) -> None:
        self.driver.expect_text(f"{self.INVENTORY_ITEM} >> nth=0 >> button", text)
