# src/config/logging_config.py

"""Logging for unattended price_monitor runs.

A periodic trigger (cron, CI schedule) starts a fresh process for
every run, so each run writes its own ``logs/run_<timestamp>.log`` at
DEBUG while stderr carries timestamped progress lines for whatever
captures the job output. Only the newest ``Settings.LOG_RETENTION``
run logs are kept; older ones are removed when a run starts.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

ROOT_LOGGER_NAME = "price_monitor"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | "
    "%(message)s"
)
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_RUN_LOG_GLOB = "run_*.log"


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def prune_run_logs(logs_dir: Path, keep: int) -> list[Path]:
    """Delete all but the newest *keep* run logs; return what was removed."""
    run_logs = sorted(logs_dir.glob(_RUN_LOG_GLOB))
    stale = run_logs[:-keep] if keep > 0 else run_logs
    removed: list[Path] = []
    for path in stale:
        try:
            path.unlink()
        except OSError:
            continue
        removed.append(path)
    return removed


def setup_logging(console_level: int | None = None) -> Path:
    """Attach the run-log file and console handlers to ``price_monitor``.

    Args:
        console_level: Minimum level echoed to stderr. Defaults to
            ``Settings.LOG_LEVEL``.

    Returns:
        The path of this run's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return log_file

    # Make room for this run's file before creating it
    removed = prune_run_logs(logs_dir, Settings.LOG_RETENTION - 1)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(
        console_level
        if console_level is not None
        else resolve_level(Settings.LOG_LEVEL)
    )
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    if removed:
        root_logger.debug("Pruned %d old run log(s)", len(removed))
    root_logger.debug("Logging initialised, log file: %s", log_file)
    return log_file
