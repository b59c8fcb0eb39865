"""
Login Actions

User workflows around authentication. Actions sequence page object calls
and return what happened; assertions stay in the page objects and tests.
"""
import logging

from config.fixtures import Credentials
from pages import LoginPage, MenuComponent

logger = logging.getLogger(__name__)


class LoginActions:
    """Login and logout workflows."""

    def __init__(self, login_page: LoginPage):
        self.login_page = login_page

    def login_as(self, credentials: Credentials) -> None:
        """Open the login page and sign in."""
        logger.info(f"Logging in as {credentials.username}")
        self.login_page.navigate()
        self.login_page.login(credentials.username, credentials.password)

    def attempt_login(self, username: str, password: str) -> str:
        """
        Try to sign in from the current page.

        Returns:
            The error banner text, or an empty string when no error shows
        """
        self.login_page.login(username, password)
        error = self.login_page.get_error_message()
        if error:
            logger.info(f"Login for {username!r} rejected: {error}")
        return error

    def logout(self, menu: MenuComponent) -> None:
        menu.logout()
