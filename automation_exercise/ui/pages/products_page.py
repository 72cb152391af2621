from typing import List

from playwright.async_api import Page

from automation_exercise.ui.base.action_options import (
    GetAllTextsOptions,
    TypeOptions,
    WaitForElementOptions,
)
from automation_exercise.ui.pages.base_page import BasePage


class ProductsPage(BasePage):
    path = "/products"

    def __init__(self, page: Page, base_url=None):
        super().__init__(page, base_url)

        # search bar, <input id="search_product"> and <button id="submit_search">
        self.search_input = page.locator('#search_product')
        self.search_button = page.locator('#submit_search')

        # product catalogue grid
        self.product_cards = page.locator('.product-image-wrapper')
        self.product_names = self.product_cards.locator('.productinfo p')
        self.add_to_cart_buttons = self.product_cards.locator('a:has-text("Add to cart")')
        self.view_product_links = self.product_cards.locator('a:has-text("View Product")')

    async def search(self, term: str) -> None:
        await self.type(self.search_input, term, TypeOptions(clear=True))
        await self.click(self.search_button)
        await self.wait_for_element(self.product_cards.first, WaitForElementOptions(state="visible"))

    async def open_product_details(self, index: int = 0) -> None:
        await self.click(self.view_product_links.nth(index))

    async def add_product_to_cart_by_name(self, name: str) -> None:
        card = self.filter_by_text(self.product_cards, name).first
        await self.hover(card)
        await self.click(card.locator('a:has-text("Add to cart")'))

    async def get_product_names(self, min_count: int = 1) -> List[str]:
        """Names shown in the grid; a search result page legitimately lists only a few."""
        return await self.get_all_texts(self.product_names, GetAllTextsOptions(trim=True, min_count=min_count))
