"""
Cart Page Object
"""
from typing import List

from .driver import PageDriver


class CartPage:
    """Page object for the shopping cart."""

    CART_ITEM = ".cart_item"
    CART_ITEM_NAME = ".cart_item .inventory_item_name"
    CHECKOUT_BUTTON = "#checkout"
    CONTINUE_SHOPPING_BUTTON = "#continue-shopping"

    PATH = "/cart.html"
    URL_PATTERN = r".*/cart\.html"

    def __init__(self, driver: PageDriver):
        self.driver = driver

    def navigate(self) -> "CartPage":
        self.driver.goto(self.PATH)
        return self

    def item_names(self) -> List[str]:
        return self.driver.all_texts(self.CART_ITEM_NAME)

    def item_count(self) -> int:
        return self.driver.count(self.CART_ITEM)

    def checkout(self) -> None:
        self.driver.click(self.CHECKOUT_BUTTON)

    def continue_shopping(self) -> None:
        self.driver.click(self.CONTINUE_SHOPPING_BUTTON)

    def expect_loaded(self, item_count: int) -> None:
        self.driver.expect_url(self.URL_PATTERN)
        self.driver.expect_count(self.CART_ITEM, item_count)
        self.driver.expect_visible(self.CHECKOUT_BUTTON)
