# src/services/notifier.py

"""Plain-text webhook notifications for price changes."""

import logging

from curl_cffi.requests import AsyncSession

from src.config.settings import Settings
from src.models.errors import NotificationError


def format_price_change(
    title: str, old_price: float, new_price: float, url: str,
) -> str:
    """Build the notification body sent when a price changes."""
    return (
        f"{title}\n"
        f"Price: ${old_price:.2f} => ${new_price:.2f}\n"
        f"URL: {url}"
    )


class WebhookNotifier:
    """POSTs plain-text messages to ``WEBHOOK_URL``.

    With no URL configured every call is a successful no-op.
    """

    def __init__(
        self,
        webhook_url: str | None = None,
        timeout: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.webhook_url = (
            webhook_url if webhook_url is not None else Settings.WEBHOOK_URL
        )
        self.timeout = timeout or Settings.NOTIFY_TIMEOUT
        self.logger = logger or logging.getLogger("price_monitor.notify")

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    async def send(self, message: str) -> None:
        """Deliver *message*; raise :class:`NotificationError` on failure."""
        if not self.webhook_url:
            return
        try:
            async with AsyncSession() as session:
                resp = await session.post(
                    self.webhook_url,
                    data=message.encode("utf-8"),
                    headers={"Content-Type": "text/plain; charset=utf-8"},
                    timeout=self.timeout,
                )
        except Exception as exc:
            msg = f"Webhook request failed: {exc}"
            raise NotificationError(msg) from exc
        if resp.status_code >= 400:
            msg = f"Webhook returned HTTP {resp.status_code}"
            raise NotificationError(msg)

    async def notify(self, message: str) -> bool:
        """Deliver *message*, logging instead of raising on failure."""
        if not self.enabled:
            self.logger.info("WEBHOOK_URL not set, skipping notification")
            return True
        try:
            await self.send(message)
        except NotificationError as exc:
            self.logger.error("Notification failed: %s", exc, exc_info=True)
            return False
        self.logger.info("Notification sent")
        return True
