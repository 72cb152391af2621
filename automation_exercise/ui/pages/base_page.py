import logging
from typing import Optional

from playwright.async_api import Page

from automation_exercise.common.errors import PageConfigurationError
from automation_exercise.common.utils.environment import init_url
from automation_exercise.common.utils.url_builder import build_url
from automation_exercise.ui.base.ui_base import UIBase

logger = logging.getLogger(__name__)


class BasePage(UIBase):
    """Page object with an optional path under the environment's UI host."""

    path: Optional[str] = None

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page)
        self.base_url = (base_url or init_url().ui).rstrip("/")

    @property
    def url(self) -> Optional[str]:
        if self.path is None:
            return None
        return build_url(self.base_url, self.path.strip("/") or None)

    async def goto(self) -> None:
        if not self.url:
            raise PageConfigurationError(f"No URL defined for {type(self).__name__}")
        logger.info(f"Opening {self.url}")
        await self.page.goto(self.url, wait_until="domcontentloaded")

    async def get_current_url(self) -> str:
        return self.page.url
