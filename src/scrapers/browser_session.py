# src/scrapers/browser_session.py

"""Scoped Playwright browser session shared by every target in a run."""

import logging
from types import TracebackType

from playwright.async_api import (
    Browser,
    Page,
    Playwright,
    async_playwright,
)

from src.config.settings import Settings
from src.models.errors import SessionAcquisitionError


class BrowserSession:
    """Async context manager yielding one Chromium page.

    ``async with BrowserSession() as page:`` launches the browser,
    opens a context with the configured user agent and returns its
    single page. The browser and driver are released exactly once
    when the block exits, however it exits.
    """

    def __init__(
        self,
        headless: bool | None = None,
        user_agent: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.headless = Settings.HEADLESS if headless is None else headless
        self.user_agent = user_agent or Settings.USER_AGENT
        self.logger = logger or logging.getLogger("price_monitor.browser")
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self.page: Page | None = None

    async def __aenter__(self) -> Page:
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
            )
            context = await self._browser.new_context(
                user_agent=self.user_agent,
            )
            self.page = await context.new_page()
        except Exception as exc:
            await self.close()
            msg = f"Failed to launch browser: {exc}"
            raise SessionAcquisitionError(msg) from exc
        self.logger.debug(
            "Browser session started (headless=%s)", self.headless
        )
        return self.page

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the browser and stop the driver. Safe to call twice."""
        browser, self._browser = self._browser, None
        driver, self._playwright = self._playwright, None
        self.page = None
        if browser is not None:
            try:
                await browser.close()
            except Exception as exc:
                self.logger.error(
                    "Error closing browser: %s", exc, exc_info=True
                )
        if driver is not None:
            try:
                await driver.stop()
            except Exception as exc:
                self.logger.error(
                    "Error stopping Playwright: %s", exc, exc_info=True
                )
            self.logger.debug("Browser session closed")
