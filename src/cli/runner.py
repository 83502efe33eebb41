# src/cli/runner.py

"""Headless CLI runner: one monitoring pass, or a status report."""

import json
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.config.targets import load_targets
from src.models.cycle_result import CycleResult, CycleStatus
from src.models.errors import SessionAcquisitionError
from src.models.target import TargetDescriptor
from src.scrapers.browser_session import BrowserSession
from src.services.run_controller import RunController
from src.storage.state_store import PriceStateStore

logger = logging.getLogger("price_monitor.cli")

# Stderr console so stdout stays free for redirection
_err = Console(stderr=True)

EXIT_OK = 0
EXIT_SESSION_FAILED = 1
EXIT_BAD_CONFIG = 2

_STATUS_STYLES: dict[CycleStatus, str] = {
    CycleStatus.UNCHANGED: "[dim]unchanged[/dim]",
    CycleStatus.UPDATED: "[green]updated[/green]",
    CycleStatus.FAILED: "[red]failed[/red]",
}


def _read_targets(targets_path: Path | None) -> list[TargetDescriptor] | None:
    """Load targets, printing a readable error instead of a traceback."""
    try:
        return load_targets(targets_path)
    except (OSError, ValueError) as exc:
        logger.error("Invalid target configuration: %s", exc)
        _err.print(f"[red]Invalid target configuration: {exc}[/red]")
        return None


def _format_price(price: float | None) -> str:
    return f"${price:,.2f}" if price is not None else "—"


def _print_results(results: list[CycleResult]) -> None:
    """Render a Rich summary table of the run."""
    table = Table(
        title="Price Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Target", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Old", justify="right")
    table.add_column("New", justify="right", style="green")
    table.add_column("Details", overflow="fold", style="dim")

    for r in results:
        details = r.reason if r.status is CycleStatus.FAILED else r.title
        table.add_row(
            r.target,
            _STATUS_STYLES[r.status],
            _format_price(r.old_price),
            _format_price(r.new_price),
            details,
        )

    _err.print(table)


async def run_monitor(
    targets_path: Path | None = None,
    headless: bool | None = None,
) -> int:
    """Run every target once and return an exit code.

    Per-target failures do not change the exit code; only a browser
    that cannot be launched (1) or a bad config file (2) do.
    """
    targets = _read_targets(targets_path)
    if targets is None:
        return EXIT_BAD_CONFIG

    controller = RunController(
        session_factory=lambda: BrowserSession(headless=headless),
    )
    _err.print(f"[bold]Checking {len(targets)} target(s)...[/bold]")
    try:
        results = await controller.run_all(targets)
    except SessionAcquisitionError as exc:
        logger.critical("%s", exc, exc_info=True)
        _err.print(f"[red]{exc}[/red]")
        return EXIT_SESSION_FAILED

    _print_results(results)
    return EXIT_OK


def show_status(
    targets_path: Path | None = None,
    as_json: bool = False,
) -> int:
    """Print the stored record of every configured target."""
    targets = _read_targets(targets_path)
    if targets is None:
        return EXIT_BAD_CONFIG

    store = PriceStateStore()
    records = {t.state_path: store.load(t.state_path) for t in targets}

    if as_json:
        payload = {
            path: record.to_dict() if record else None
            for path, record in records.items()
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return EXIT_OK

    table = Table(
        title="Stored Prices",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Target", style="bold")
    table.add_column("Product", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Observed", style="dim")

    for path, record in records.items():
        if record is None:
            table.add_row(path, "[yellow]never observed[/yellow]", "—", "—")
        else:
            table.add_row(
                path,
                record.name[:60],
                _format_price(record.price),
                record.timestamp or "—",
            )

    Console().print(table)
    return EXIT_OK
