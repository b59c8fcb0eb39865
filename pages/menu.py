"""
Side Menu Component

The burger menu present on every page after login.
"""
import logging

from .driver import PageDriver

logger = logging.getLogger(__name__)


class MenuComponent:
    """Burger menu: logout and app state reset."""

    MENU_BUTTON = "#react-burger-menu-btn"
    LOGOUT_LINK = "#logout_sidebar_link"
    RESET_LINK = "#reset_sidebar_link"
    CLOSE_BUTTON = "#react-burger-cross-btn"

    def __init__(self, driver: PageDriver):
        self.driver = driver

    def open(self) -> "MenuComponent":
        self.driver.click(self.MENU_BUTTON)
        return self

    def close(self) -> None:
        self.driver.click(self.CLOSE_BUTTON)

    def logout(self) -> None:
        logger.info("Logging out")
        self.open()
        self.driver.click(self.LOGOUT_LINK)

    def reset_app_state(self) -> None:
        """Clear the cart and button states kept by the store."""
        self.open()
        self.driver.click(self.RESET_LINK)
        self.close()
