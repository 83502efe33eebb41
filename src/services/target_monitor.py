# src/services/target_monitor.py

"""One extraction-compare-notify cycle for a single target."""

import logging
import math

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from src.config.settings import Settings
from src.filters.price_normalizer import first_line, normalize_price
from src.models.cycle_result import CycleResult, Observation
from src.models.errors import (
    ElementNotFoundError,
    PriceMonitorError,
    PriceUnparseableError,
)
from src.models.price_record import PriceRecord
from src.models.target import TargetDescriptor
from src.scrapers.navigation_driver import NavigationDriver
from src.services.notifier import WebhookNotifier, format_price_change
from src.storage.state_store import PriceStateStore


class TargetMonitor:
    """Checks one target's price against its stored record.

    Collaborators are injectable; defaults come from ``Settings``.
    """

    def __init__(
        self,
        navigator: NavigationDriver | None = None,
        store: PriceStateStore | None = None,
        notifier: WebhookNotifier | None = None,
        title_timeout: float | None = None,
        price_timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("price_monitor.monitor")
        self.navigator = navigator or NavigationDriver(logger=self.logger)
        self.store = store or PriceStateStore(logger=self.logger)
        self.notifier = notifier or WebhookNotifier(logger=self.logger)
        self.title_timeout_ms = (
            title_timeout or Settings.TITLE_TIMEOUT
        ) * 1000
        self.price_timeout_ms = (
            price_timeout or Settings.PRICE_TIMEOUT
        ) * 1000

    async def _visible_text(
        self, page: Page, element: str, selector: str, timeout_ms: float,
    ) -> str:
        """Wait for *selector* to be visible and return its inner text."""
        locator = page.locator(selector).first
        try:
            await locator.wait_for(state="visible", timeout=timeout_ms)
            text: str = await locator.inner_text()
        except PlaywrightError as exc:
            # Includes playwright TimeoutError
            raise ElementNotFoundError(element, selector) from exc
        return text

    async def observe(
        self, target: TargetDescriptor, page: Page,
    ) -> Observation:
        """Navigate and extract title + price.

        Raises:
            NavigationError, ElementNotFoundError, PriceUnparseableError
        """
        resolved = await self.navigator.resolve_target(page, target)

        title = (
            await self._visible_text(
                resolved.page,
                "title",
                target.title_selector,
                self.title_timeout_ms,
            )
        ).strip()
        raw_price_text = first_line(
            await self._visible_text(
                resolved.page,
                "price",
                target.price_selector,
                self.price_timeout_ms,
            )
        )
        price = normalize_price(raw_price_text)
        if math.isnan(price):
            raise PriceUnparseableError(raw_price_text)

        self.logger.info("Current product: %s", title)
        self.logger.info("Current price: %.2f", price)
        return Observation(
            title=title,
            raw_price_text=raw_price_text,
            price=price,
            resolved_url=resolved.resolved_url,
        )

    async def run_once(
        self, target: TargetDescriptor, page: Page,
    ) -> CycleResult:
        """Run a full cycle; per-target errors become a failed result."""
        try:
            observation = await self.observe(target, page)
        except PriceMonitorError as exc:
            self.logger.error(
                "[%s] %s", target.label, exc,
            )
            return CycleResult.failed(target.state_path, exc.reason)

        prior = self.store.load(target.state_path) or PriceRecord.empty()

        if observation.price == prior.price:
            self.logger.info(
                "[%s] Price unchanged, skipping notification", target.label
            )
            return CycleResult.unchanged(target.state_path, observation)

        self.logger.info(
            "[%s] Price changed %.2f => %.2f, notifying",
            target.label,
            prior.price,
            observation.price,
        )
        await self.notifier.notify(
            format_price_change(
                observation.title,
                prior.price,
                observation.price,
                observation.resolved_url,
            )
        )
        self.store.save(
            target.state_path,
            PriceRecord.observed_now(observation.price, observation.title),
        )
        return CycleResult.updated(
            target.state_path, prior.price, observation,
        )
