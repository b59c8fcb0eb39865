"""
Product Detail Page Object
"""
from decimal import Decimal

from verification import parse_price

from .driver import PageDriver


class ProductDetailPage:
    """Page object for a single product's detail view."""

    DETAILS_NAME = ".inventory_details_name"
    DETAILS_PRICE = ".inventory_details_price"
    DETAILS_DESC = ".inventory_details_desc"
    ADD_TO_CART_BUTTON = 'button[id^="add-to-cart"]'
    BACK_BUTTON = '[data-test="back-to-products"]'

    URL_PATTERN = r".*/inventory-item\.html"

    def __init__(self, driver: PageDriver):
        self.driver = driver

    def name(self) -> str:
        return self.driver.get_text(self.DETAILS_NAME).strip()

    def price(self) -> Decimal:
        """Displayed price as a number."""
        return parse_price(self.driver.get_text(self.DETAILS_PRICE))

    def description(self) -> str:
        return self.driver.get_text(self.DETAILS_DESC).strip()

    def add_to_cart(self) -> None:
        self.driver.click(self.ADD_TO_CART_BUTTON)

    def back_to_products(self) -> None:
        self.driver.click(self.BACK_BUTTON)

    def expect_loaded(self) -> None:
        """Assert URL and name, price and description are showing."""
        self.driver.expect_url(self.URL_PATTERN)
        self.driver.expect_visible(self.DETAILS_NAME)
        self.driver.expect_visible(self.DETAILS_PRICE)
        self.driver.expect_visible(self.DETAILS_DESC)
