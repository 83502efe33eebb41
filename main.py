# main.py

"""Entry point for the price_monitor command."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from src.config.logging_config import setup_logging

logger = logging.getLogger("price_monitor.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="price_monitor",
        description=(
            "Check configured product pages once and send a webhook "
            "notification when a price changes."
        ),
        epilog="Set WEBHOOK_URL to enable notifications.",
    )
    parser.add_argument(
        "-t",
        "--targets",
        type=Path,
        default=None,
        help="Path to a targets JSON file (default: src/config/targets.json).",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window instead of running headless.",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        default=False,
        help="Print stored prices for the configured targets and exit.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        dest="as_json",
        help="Print the records as JSON (only valid with --status).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Echo DEBUG lines to the console.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only echo warnings and errors to the console.",
    )
    return parser


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and cross-check the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.as_json and not args.status:
        parser.error("--json can only be used with --status")
    return args


def _console_level(args: argparse.Namespace) -> int | None:
    """Console log level from -v/-q; None defers to Settings.LOG_LEVEL."""
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return None


def _run_monitor(args: argparse.Namespace) -> None:
    """Run one monitoring pass over every target."""
    from src.cli.runner import run_monitor

    exit_code = asyncio.run(
        run_monitor(
            targets_path=args.targets,
            headless=False if args.headed else None,
        )
    )
    sys.exit(exit_code)


def _show_status(args: argparse.Namespace) -> None:
    """Print the persisted price records."""
    from src.cli.runner import show_status

    sys.exit(show_status(args.targets, as_json=args.as_json))


def main() -> None:
    """Route to a monitoring pass (default) or the status report."""
    args = _parse_args()
    log_file = setup_logging(console_level=_console_level(args))
    logger.debug("price_monitor starting, log file: %s", log_file)

    if args.status:
        _show_status(args)
    else:
        _run_monitor(args)


if __name__ == "__main__":
    main()
