# tests/test_notifier.py

"""Tests for the webhook notifier."""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from src.models.errors import NotificationError
from src.services.notifier import WebhookNotifier, format_price_change

SESSION_PATH = "src.services.notifier.AsyncSession"
HOOK = "https://ntfy.example.com/prices"


def _mock_session_cls(
    status_code: int = 200, error: Exception | None = None,
) -> tuple[MagicMock, MagicMock]:
    """Build an AsyncSession class mock and the session it yields."""
    session = MagicMock()
    if error is not None:
        session.post = AsyncMock(side_effect=error)
    else:
        session.post = AsyncMock(
            return_value=MagicMock(status_code=status_code)
        )
    session_cls = MagicMock()
    session_cls.return_value.__aenter__.return_value = session
    return session_cls, session


class TestFormatPriceChange(unittest.TestCase):
    """Notification body format."""

    def test_message_layout(self) -> None:
        msg = format_price_change(
            "Mac mini M4", 599.0, 579.0, "https://shop.example.com/p/1"
        )
        self.assertEqual(
            msg,
            "Mac mini M4\n"
            "Price: $599.00 => $579.00\n"
            "URL: https://shop.example.com/p/1",
        )

    def test_first_observation_shows_zero(self) -> None:
        msg = format_price_change("Thing", 0, 12.5, "u")
        self.assertIn("$0.00 => $12.50", msg)


class TestWebhookNotifier(unittest.IsolatedAsyncioTestCase):
    """notify() / send() behaviour."""

    async def test_no_url_is_successful_noop(self) -> None:
        session_cls, session = _mock_session_cls()
        with patch(SESSION_PATH, session_cls):
            notifier = WebhookNotifier(webhook_url="")
            self.assertFalse(notifier.enabled)
            self.assertTrue(await notifier.notify("hello"))
        session.post.assert_not_called()

    async def test_default_url_from_settings(self) -> None:
        """conftest clears WEBHOOK_URL, so the default is disabled."""
        self.assertFalse(WebhookNotifier().enabled)

    async def test_posts_plain_text(self) -> None:
        session_cls, session = _mock_session_cls()
        with patch(SESSION_PATH, session_cls):
            ok = await WebhookNotifier(webhook_url=HOOK).notify("Price: $1")
        self.assertTrue(ok)
        session.post.assert_awaited_once()
        args, kwargs = session.post.call_args
        self.assertEqual(args[0], HOOK)
        self.assertEqual(kwargs["data"], b"Price: $1")
        self.assertTrue(
            kwargs["headers"]["Content-Type"].startswith("text/plain")
        )

    async def test_http_error_returns_false(self) -> None:
        session_cls, _ = _mock_session_cls(status_code=500)
        with patch(SESSION_PATH, session_cls):
            notifier = WebhookNotifier(webhook_url=HOOK)
            with self.assertLogs("price_monitor.notify", level="ERROR"):
                self.assertFalse(await notifier.notify("x"))

    async def test_transport_error_returns_false(self) -> None:
        session_cls, _ = _mock_session_cls(
            error=ConnectionError("refused")
        )
        with patch(SESSION_PATH, session_cls):
            self.assertFalse(
                await WebhookNotifier(webhook_url=HOOK).notify("x")
            )

    async def test_send_raises_notification_error(self) -> None:
        session_cls, _ = _mock_session_cls(status_code=404)
        with patch(SESSION_PATH, session_cls):
            with self.assertRaises(NotificationError) as ctx:
                await WebhookNotifier(webhook_url=HOOK).send("x")
        self.assertIn("404", str(ctx.exception))

    async def test_non_ascii_title_encoded_utf8(self) -> None:
        session_cls, session = _mock_session_cls()
        with patch(SESSION_PATH, session_cls):
            await WebhookNotifier(webhook_url=HOOK).notify("Café €5")
        self.assertEqual(
            session.post.call_args.kwargs["data"], "Café €5".encode()
        )


if __name__ == "__main__":
    unittest.main()
