"""
Unit tests for the actions layer.
"""
from decimal import Decimal
from unittest.mock import call, create_autospec

import pytest

from actions import InventoryActions, LoginActions
from config import Credentials
from pages import CartPage, InventoryPage, LoginPage, MenuComponent, ProductDetailPage
from verification import SortSpec, VerdictStatus, verify_order


@pytest.fixture
def login_page():
    return create_autospec(LoginPage, instance=True)


@pytest.fixture
def inventory():
    return create_autospec(InventoryPage, instance=True)


@pytest.fixture
def detail():
    return create_autospec(ProductDetailPage, instance=True)


@pytest.fixture
def cart():
    return create_autospec(CartPage, instance=True)


@pytest.fixture
def inventory_actions(inventory, detail, cart):
    return InventoryActions(inventory, detail, cart)


class TestLoginActions:
    """Tests for LoginActions."""

    def test_login_as_navigates_then_logs_in(self, login_page):
        LoginActions(login_page).login_as(Credentials("standard_user", "secret_sauce"))

        assert login_page.mock_calls == [
            call.navigate(),
            call.login("standard_user", "secret_sauce"),
        ]

    def test_attempt_login_returns_error(self, login_page):
        login_page.get_error_message.return_value = "Epic sadface: Sorry, this user has been locked out."

        error = LoginActions(login_page).attempt_login("locked_out_user", "secret_sauce")

        assert "locked out" in error
        login_page.navigate.assert_not_called()

    def test_attempt_login_success_is_empty(self, login_page):
        login_page.get_error_message.return_value = ""
        assert LoginActions(login_page).attempt_login("standard_user", "secret_sauce") == ""

    def test_logout_uses_menu(self, login_page):
        menu = create_autospec(MenuComponent, instance=True)
        LoginActions(login_page).logout(menu)
        menu.logout.assert_called_once_with()


class TestInventoryActions:
    """Tests for InventoryActions."""

    def test_sort_products_returns_verdict(self, inventory_actions, inventory):
        spec = SortSpec.parse("price:desc")
        inventory.ordering_verdict.return_value = verify_order(["$49.99", "$7.99"], spec)

        verdict = inventory_actions.sort_products(spec)

        inventory.sort_by.assert_called_once_with(spec)
        inventory.ordering_verdict.assert_called_once_with(spec)
        assert verdict.status == VerdictStatus.SORTED

    def test_sort_products_does_not_assert(self, inventory_actions, inventory):
        spec = SortSpec.parse("name")
        inventory.ordering_verdict.return_value = verify_order(["b", "a"], spec)

        verdict = inventory_actions.sort_products(spec)

        assert verdict.status == VerdictStatus.NOT_SORTED
        inventory.verify_sorted.assert_not_called()

    def test_add_products_to_cart(self, inventory_actions, inventory):
        inventory.cart_count.return_value = 2

        count = inventory_actions.add_products_to_cart(["Sauce Labs Backpack", "Sauce Labs Onesie"])

        assert count == 2
        assert inventory.add_to_cart_by_name.call_args_list == [
            call("Sauce Labs Backpack"),
            call("Sauce Labs Onesie"),
        ]

    def test_add_unknown_product_propagates(self, inventory_actions, inventory):
        inventory.add_to_cart_by_name.side_effect = LookupError("No product named 'x'")
        with pytest.raises(LookupError):
            inventory_actions.add_products_to_cart(["x"])
        inventory.cart_count.assert_not_called()

    def test_view_first_product(self, inventory_actions, inventory, detail):
        detail.name.return_value = "Sauce Labs Backpack"
        detail.price.return_value = Decimal("29.99")
        detail.description.return_value = "carry.allTheThings()"

        info = inventory_actions.view_first_product()

        inventory.open_first_product.assert_called_once_with()
        assert info == {
            "name": "Sauce Labs Backpack",
            "price": Decimal("29.99"),
            "description": "carry.allTheThings()",
        }

    def test_open_cart(self, inventory_actions, inventory, cart):
        cart.item_names.return_value = ["Sauce Labs Onesie"]

        assert inventory_actions.open_cart() == ["Sauce Labs Onesie"]
        inventory.open_cart.assert_called_once_with()
