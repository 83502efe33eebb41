# src/config/settings.py

"""Central configuration for the price_monitor service."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment flag ("1", "true", "yes" are truthy)."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Central configuration for the price_monitor service."""

    # --- Notification ---
    WEBHOOK_URL: str | None = os.getenv("WEBHOOK_URL") or None
    NOTIFY_TIMEOUT: int = 15            # Seconds before a webhook POST gives up

    # --- Browser ---
    HEADLESS: bool = _env_flag("PRICE_MONITOR_HEADLESS", True)
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/119.0.0.0 Safari/537.36"
    )

    # --- Timeouts (seconds) ---
    NAVIGATION_TIMEOUT: float = 60.0    # goto() until DOMContentLoaded
    CLICK_TIMEOUT: float = 30.0         # Locating + clicking a pre-click target
    TITLE_TIMEOUT: float = 60.0         # Title element visibility
    PRICE_TIMEOUT: float = 300.0        # Price blocks may render after title

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    TARGETS_PATH: Path = Path(
        os.getenv(
            "PRICE_MONITOR_TARGETS",
            str(BASE_DIR / "src" / "config" / "targets.json"),
        )
    )
    STATE_DIR: Path = Path(
        os.getenv("PRICE_MONITOR_STATE_DIR", str(BASE_DIR / "state"))
    )
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("PRICE_MONITOR_LOG_LEVEL", "INFO")
    LOG_RETENTION: int = 30             # Run logs kept in LOGS_DIR
