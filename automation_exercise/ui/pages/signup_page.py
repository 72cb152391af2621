import logging

from playwright.async_api import Page

from automation_exercise.common.data.test_data_provider import UserProfile
from automation_exercise.ui.base.action_options import ClickOptions, TypeOptions
from automation_exercise.ui.pages.base_page import BasePage

logger = logging.getLogger(__name__)


class SignupPage(BasePage):
    """"Enter Account Information" form reached after LoginPage.sign_up."""

    path = "/signup"

    def __init__(self, page: Page, base_url=None):
        super().__init__(page, base_url)

        self.title_mr = page.locator('#id_gender1')
        self.title_mrs = page.locator('#id_gender2')
        self.password = page.locator('[data-qa="password"]')
        self.newsletter = page.locator('#newsletter')
        self.special_offers = page.locator('#optin')
        self.first_name = page.locator('[data-qa="first_name"]')
        self.last_name = page.locator('[data-qa="last_name"]')
        self.company = page.locator('[data-qa="company"]')
        self.address = page.locator('[data-qa="address"]')
        self.address2 = page.locator('[data-qa="address2"]')
        self.state = page.locator('[data-qa="state"]')
        self.city = page.locator('[data-qa="city"]')
        self.zip_code = page.locator('[data-qa="zipcode"]')
        self.mobile_number = page.locator('[data-qa="mobile_number"]')
        self.create_account = page.locator('[data-qa="create-account"]')
        self.days = page.locator('[data-qa="days"]')
        self.months = page.locator('[data-qa="months"]')
        self.years = page.locator('[data-qa="years"]')
        self.country = page.locator('[data-qa="country"]')
        self.account_created = page.locator('[data-qa="account-created"]')

    async def select_day(self, day: str) -> None:
        await self.days.select_option(day)

    async def select_month(self, month: str) -> None:
        await self.months.select_option(month)

    async def select_year(self, year: str) -> None:
        await self.years.select_option(year)

    async def select_country(self, country: str) -> None:
        await self.country.select_option(country)

    async def fill_account_information(
        self,
        profile: UserProfile,
        birth_day: str = "15",
        birth_month: str = "5",
        birth_year: str = "1990",
        country: str = "United States",
        ) -> None:
        """
        Fill the account form from a generated profile (does not submit).

        The site only offers a fixed country list, so the country comes in
        separately instead of from the Faker address.
        """
        logger.info(f"Filling account information for {profile.email}")
        fill = TypeOptions(clear=True)

        await self.click(self.title_mr)
        await self.type(self.password, profile.password, fill)
        await self.select_day(birth_day)
        await self.select_month(birth_month)
        await self.select_year(birth_year)
        await self.click(self.newsletter)
        await self.click(self.special_offers)
        await self.type(self.first_name, profile.first_name, fill)
        await self.type(self.last_name, profile.last_name, fill)
        await self.type(self.company, profile.company, fill)
        await self.type(self.address, profile.address.street, fill)
        await self.select_country(country)
        await self.type(self.state, profile.address.state, fill)
        await self.type(self.city, profile.address.city, fill)
        await self.type(self.zip_code, profile.address.zip_code, fill)
        await self.type(self.mobile_number, profile.phone_number, fill)

    async def submit(self) -> None:
        await self.click(self.create_account, ClickOptions(wait_for=self.account_created))
