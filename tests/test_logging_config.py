# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.config.logging_config import (
    ROOT_LOGGER_NAME,
    prune_run_logs,
    resolve_level,
    setup_logging,
)
from src.config.settings import Settings


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Start every test from a logger with no handlers."""
        self.root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._drop_handlers()
        self.addCleanup(self._drop_handlers)

    def _drop_handlers(self) -> None:
        for handler in list(self.root_logger.handlers):
            handler.close()
            self.root_logger.removeHandler(handler)

    def test_setup_creates_log_file(self) -> None:
        """setup_logging returns a path that exists on disk."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_file_handler_level_debug(self) -> None:
        """File handler captures DEBUG and above."""
        setup_logging()
        file_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_level_info(self) -> None:
        """Console handler shows progress lines at INFO by default."""
        setup_logging()
        stream_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(stream_handlers[0].level, logging.INFO)

    def test_console_level_override(self) -> None:
        setup_logging(console_level=logging.WARNING)
        levels = {
            h.level
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        }
        self.assertEqual(levels, {logging.WARNING})

    def test_console_lines_are_timestamped(self) -> None:
        setup_logging()
        console = next(
            h
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        )
        record = logging.LogRecord(
            "price_monitor.run", logging.INFO, __file__, 1,
            "Checking target", None, None,
        )
        formatted = console.format(record)
        self.assertRegex(
            formatted, r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \| INFO"
        )

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice does not duplicate handlers."""
        setup_logging()
        count_before = len(self.root_logger.handlers)
        setup_logging()
        self.assertEqual(count_before, len(self.root_logger.handlers))

    def test_child_loggers_reach_file(self) -> None:
        """Module loggers under price_monitor.* land in the run log."""
        log_path = setup_logging()
        logging.getLogger("price_monitor.monitor").info("price changed")
        for handler in self.root_logger.handlers:
            handler.flush()
        self.assertIn("price changed", log_path.read_text(encoding="utf-8"))

    def test_log_file_inside_logs_dir(self) -> None:
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")

    def test_settings_log_level_drives_console(self) -> None:
        with patch.object(Settings, "LOG_LEVEL", "warning"):
            setup_logging()
        levels = {
            h.level
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        }
        self.assertEqual(levels, {logging.WARNING})

    def test_old_run_logs_pruned_on_setup(self) -> None:
        """Only LOG_RETENTION run logs remain, counting the new one."""
        logs_dir = Settings.LOGS_DIR
        logs_dir.mkdir(parents=True, exist_ok=True)
        for day in range(1, 6):
            (logs_dir / f"run_2020010{day}_000000.log").write_text("")
        with patch.object(Settings, "LOG_RETENTION", 3):
            log_path = setup_logging()
        remaining = sorted(p.name for p in logs_dir.glob("run_*.log"))
        self.assertEqual(len(remaining), 3)
        self.assertIn(log_path.name, remaining)
        self.assertNotIn("run_20200101_000000.log", remaining)


class TestPruneRunLogs(unittest.TestCase):
    """prune_run_logs() keeps the newest files by name."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.logs_dir = Path(self._tmp.name)
        for stamp in ("20260101_000000", "20260102_000000", "20260103_000000"):
            (self.logs_dir / f"run_{stamp}.log").write_text("")
        (self.logs_dir / "notes.txt").write_text("keep me")

    def test_keeps_newest(self) -> None:
        removed = prune_run_logs(self.logs_dir, keep=1)
        self.assertEqual(len(removed), 2)
        self.assertTrue((self.logs_dir / "run_20260103_000000.log").exists())

    def test_ignores_other_files(self) -> None:
        prune_run_logs(self.logs_dir, keep=0)
        self.assertEqual(
            [p.name for p in self.logs_dir.iterdir()], ["notes.txt"]
        )

    def test_nothing_to_prune(self) -> None:
        self.assertEqual(prune_run_logs(self.logs_dir, keep=10), [])


class TestResolveLevel(unittest.TestCase):
    """resolve_level() maps names to logging constants."""

    def test_known_names(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" ERROR "), logging.ERROR)

    def test_unknown_or_empty_falls_back(self) -> None:
        self.assertEqual(resolve_level("chatty"), logging.INFO)
        self.assertEqual(resolve_level(None, logging.WARNING), logging.WARNING)


if __name__ == "__main__":
    unittest.main()
