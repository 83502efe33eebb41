# src/scrapers/navigation_driver.py

"""Drives the shared page to a target's final product page."""

import logging
from dataclasses import dataclass

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from src.config.settings import Settings
from src.models.errors import NavigationError
from src.models.target import TargetDescriptor


@dataclass
class ResolvedPage:
    """The page after navigation, plus the URL it settled on."""

    page: Page
    resolved_url: str


class NavigationDriver:
    """Navigates directly, or via a root page and a click-through."""

    def __init__(
        self,
        navigation_timeout: float | None = None,
        click_timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.navigation_timeout_ms = (
            navigation_timeout or Settings.NAVIGATION_TIMEOUT
        ) * 1000
        self.click_timeout_ms = (
            click_timeout or Settings.CLICK_TIMEOUT
        ) * 1000
        self.logger = logger or logging.getLogger("price_monitor.navigation")

    async def _goto(self, page: Page, url: str) -> None:
        self.logger.info("Visiting %s", url)
        try:
            await page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=self.navigation_timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise NavigationError(url, "timed out waiting for page") from exc
        except PlaywrightError as exc:
            raise NavigationError(url, exc.message) from exc

    async def _click_through(
        self, page: Page, root_url: str, selector: str,
    ) -> None:
        """Click *selector* and wait for the navigation it triggers."""
        try:
            async with page.expect_navigation(
                wait_until="domcontentloaded",
                timeout=self.navigation_timeout_ms,
            ):
                try:
                    await page.locator(selector).first.click(
                        timeout=self.click_timeout_ms,
                    )
                except PlaywrightError as exc:
                    raise NavigationError(
                        root_url, f"click target '{selector}' not found"
                    ) from exc
        except PlaywrightTimeoutError as exc:
            raise NavigationError(
                root_url, f"clicking '{selector}' did not navigate"
            ) from exc
        except PlaywrightError as exc:
            raise NavigationError(root_url, exc.message) from exc

    async def resolve_target(
        self, page: Page, target: TargetDescriptor,
    ) -> ResolvedPage:
        """Bring *page* to the product page described by *target*.

        Raises:
            NavigationError: Navigation timed out or the click target
                could not be located.
        """
        if target.pre_click is not None:
            await self._goto(page, target.pre_click.root_url)
            await self._click_through(
                page,
                target.pre_click.root_url,
                target.pre_click.click_selector,
            )
            resolved_url = page.url
            self.logger.debug("Click-through landed on %s", resolved_url)
        else:
            await self._goto(page, target.entry_url)
            resolved_url = target.entry_url
        return ResolvedPage(page=page, resolved_url=resolved_url)
