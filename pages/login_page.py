"""
Login Page Object

Encapsulates login page interactions.
"""
from .driver import PageDriver


class LoginPage:
    """Page object for the store's login form."""

    # Selectors
    USERNAME_INPUT = '[data-test="username"]'
    PASSWORD_INPUT = '[data-test="password"]'
    LOGIN_BUTTON = '[data-test="login-button"]'
    ERROR_MESSAGE = '[data-test="error"]'
    LOGIN_LOGO = ".login_logo"

    PATH = "/"

    def __init__(self, driver: PageDriver):
        self.driver = driver

    def navigate(self) -> "LoginPage":
        """Navigate to login page."""
        self.driver.goto(self.PATH)
        return self

    def enter_username(self, username: str) -> "LoginPage":
        self.driver.clear_and_fill(self.USERNAME_INPUT, username)
        return self

    def enter_password(self, password: str) -> "LoginPage":
        self.driver.clear_and_fill(self.PASSWORD_INPUT, password)
        return self

    def click_login(self) -> None:
        self.driver.click(self.LOGIN_BUTTON)

    def login(self, username: str, password: str) -> None:
        """Complete login flow."""
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()

    def clear_username(self) -> "LoginPage":
        self.driver.clear(self.USERNAME_INPUT)
        return self

    def clear_password(self) -> "LoginPage":
        self.driver.clear(self.PASSWORD_INPUT)
        return self

    def get_error_message(self) -> str:
        """Get login error message if present."""
        if self.driver.is_visible(self.ERROR_MESSAGE):
            return self.driver.get_text(self.ERROR_MESSAGE)
        return ""

    def is_login_page(self) -> bool:
        """Check if the login form is showing."""
        return self.driver.is_visible(self.LOGIN_BUTTON)

    # Assertions
    def expect_loaded(self) -> None:
        """Assert logo and login form are visible."""
        self.driver.expect_visible(self.LOGIN_LOGO)
        self.driver.expect_visible(self.USERNAME_INPUT)
        self.driver.expect_visible(self.PASSWORD_INPUT)
        self.driver.expect_visible(self.LOGIN_BUTTON)

    def expect_error_visible(self) -> None:
        self.driver.expect_visible(self.ERROR_MESSAGE)

    def expect_error_contains(self, text: str) -> None:
        self.driver.expect_text(self.ERROR_MESSAGE, text)

    def expect_fields_empty(self) -> None:
        self.driver.expect_value(self.USERNAME_INPUT, "")
        self.driver.expect_value(self.PASSWORD_INPUT, "")

    def expect_password_masked(self) -> None:
        """Assert the password input does not render its value."""
        self.driver.expect_attribute(self.PASSWORD_INPUT, "type", "password")
