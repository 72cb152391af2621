import logging

from playwright.async_api import Page

from automation_exercise.ui.base.action_options import TypeOptions
from automation_exercise.ui.pages.base_page import BasePage

logger = logging.getLogger(__name__)

CLEAR_FIRST = TypeOptions(clear=True)


class LoginPage(BasePage):
    """The /login page: "New User Signup!" and "Login to your account" forms."""

    path = "/login"

    def __init__(self, page: Page, base_url=None):
        super().__init__(page, base_url)

        self.signup_name = page.locator('[data-qa="signup-name"]')
        self.signup_email = page.locator('[data-qa="signup-email"]')
        self.signup_button = page.locator('[data-qa="signup-button"]')

        self.login_email = page.locator('[data-qa="login-email"]')
        self.login_password = page.locator('[data-qa="login-password"]')
        self.login_button = page.locator('[data-qa="login-button"]')

        self.error_message = page.locator('form p[style*="color: red"]')

    async def sign_up(self, name: str, email: str) -> None:
        logger.info(f"Signing up as {email}")
        await self.type(self.signup_name, name, CLEAR_FIRST)
        await self.type(self.signup_email, email, CLEAR_FIRST)
        await self.click(self.signup_button)

    async def log_in(self, email: str, password: str) -> None:
        logger.info(f"Logging in as {email}")
        await self.type(self.login_email, email, CLEAR_FIRST)
        await self.type(self.login_password, password, CLEAR_FIRST)
        await self.click(self.login_button)
