import logging

from playwright.async_api import Page

from automation_exercise.ui.pages.base_page import BasePage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    path = "/"

    def __init__(self, page: Page, base_url=None):
        super().__init__(page, base_url)

        self.nav_home = page.locator('a[href="/"]')
        self.nav_products = page.locator('a[href="/products"]')
        self.nav_signup_login = page.locator('a[href="/login"]')

        # "Category" block in the left sidebar
        self.category_sidebar = page.locator('.left-sidebar h2:has-text("Category")')

        # grid of "FEATURES ITEMS" cards
        self.featured_products = page.locator('.features_items .product-image-wrapper')
        self.first_featured_add_to_cart = self.featured_products.first.locator('a:has-text("Add to cart")')

    async def go_to_products(self) -> None:
        await self.click(self.nav_products)

    async def open_signup_login(self) -> None:
        logger.info("Opening Signup / Login")
        await self.click(self.nav_signup_login)

    async def add_first_featured_to_cart(self) -> None:
        # hovering reveals the card overlay
        await self.hover(self.featured_products.first)
        await self.click(self.first_featured_add_to_cart)

    async def open_product_details_by_name(self, name: str) -> None:
        card = self.filter_by_text(self.featured_products, name).first
        await self.click(card.locator('a:has-text("View Product")'))
