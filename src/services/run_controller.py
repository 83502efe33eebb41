# src/services/run_controller.py

"""Runs every configured target through one shared browser session."""

import logging
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any

from src.models.cycle_result import CycleResult, CycleStatus
from src.models.target import TargetDescriptor
from src.scrapers.browser_session import BrowserSession
from src.services.target_monitor import TargetMonitor

SessionFactory = Callable[[], AbstractAsyncContextManager[Any]]


class RunController:
    """Sequential, failure-isolating driver for a whole run.

    Targets are checked strictly one after another on the same page.
    A target that fails is recorded and the run moves on; only a
    :class:`~src.models.errors.SessionAcquisitionError` escapes.
    """

    def __init__(
        self,
        monitor: TargetMonitor | None = None,
        session_factory: SessionFactory | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("price_monitor.run")
        self.monitor = monitor or TargetMonitor(logger=self.logger)
        self.session_factory: SessionFactory = (
            session_factory or (lambda: BrowserSession(logger=self.logger))
        )

    async def run_all(
        self, targets: Sequence[TargetDescriptor],
    ) -> list[CycleResult]:
        """Check every target in order and return one result per target."""
        results: list[CycleResult] = []
        async with self.session_factory() as page:
            for index, target in enumerate(targets, 1):
                self.logger.info(
                    "Checking target %d/%d: %s",
                    index,
                    len(targets),
                    target.label,
                )
                try:
                    result = await self.monitor.run_once(target, page)
                except Exception as exc:
                    self.logger.error(
                        "[%s] Unexpected error: %s",
                        target.label,
                        exc,
                        exc_info=True,
                    )
                    result = CycleResult.failed(
                        target.state_path, f"{type(exc).__name__}({exc})"
                    )
                results.append(result)

        failed = sum(1 for r in results if r.status is CycleStatus.FAILED)
        updated = sum(1 for r in results if r.status is CycleStatus.UPDATED)
        self.logger.info(
            "Run complete: %d target(s), %d updated, %d failed",
            len(results),
            updated,
            failed,
        )
        return results
