"""
Inventory Actions

Shopping workflows composed from the inventory, product detail and cart
page objects.
"""
import logging
from typing import Any, Dict, Iterable, List

from pages import CartPage, InventoryPage, ProductDetailPage
from verification import SortSpec, Verdict

logger = logging.getLogger(__name__)


class InventoryActions:
    """Sorting, cart and product detail workflows."""

    def __init__(
        self,
        inventory: InventoryPage,
        detail: ProductDetailPage,
        cart: CartPage,
    ):
        self.inventory = inventory
        self.detail = detail
        self.cart = cart

    def sort_products(self, spec: SortSpec) -> Verdict:
        """Apply an ordering and report whether the listing follows it."""
        self.inventory.sort_by(spec)
        verdict = self.inventory.ordering_verdict(spec)
        logger.info(f"Sort by {spec}: {verdict.status.value}")
        return verdict

    def add_products_to_cart(self, names: Iterable[str]) -> int:
        """
        Add each named product to the cart.

        Returns:
            Cart badge count afterwards
        """
        for name in names:
            self.inventory.add_to_cart_by_name(name)
        return self.inventory.cart_count()

    def view_first_product(self) -> Dict[str, Any]:
        """Open the first product and read its details."""
        self.inventory.open_first_product()
        return {
            "name": self.detail.name(),
            "price": self.detail.price(),
            "description": self.detail.description(),
        }

    def open_cart(self) -> List[str]:
        """Go to the cart and return the names it lists."""
        self.inventory.open_cart()
        return self.cart.item_names()
