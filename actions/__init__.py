"""
Actions

Business-level workflows built on the page objects.
"""

from .inventory_actions import InventoryActions
from .login_actions import LoginActions

__all__ = ["InventoryActions", "LoginActions"]
