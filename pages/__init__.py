"""
Page Object Models

Page objects encapsulate selectors and element interactions for one
screen. Each composes a PageDriver bound to a Playwright page.
"""

from .cart_page import CartPage
from .driver import PageDriver
from .inventory_page import InventoryPage
from .login_page import LoginPage
from .menu import MenuComponent
from .product_detail_page import ProductDetailPage

__all__ = [
    "PageDriver",
    "LoginPage",
    "InventoryPage",
    "ProductDetailPage",
    "CartPage",
    "MenuComponent",
]
