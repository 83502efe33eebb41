# src/models/cycle_result.py

"""Per-cycle observation and outcome models."""

from dataclasses import dataclass
from enum import Enum


class CycleStatus(Enum):
    """Outcome of one extraction-compare-notify pass over a target."""

    UNCHANGED = "unchanged"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass
class Observation:
    """What was read from the page during one cycle. Not persisted."""

    title: str
    raw_price_text: str
    price: float
    resolved_url: str


@dataclass
class CycleResult:
    """Result of ``TargetMonitor.run_once`` for a single target."""

    target: str
    status: CycleStatus
    old_price: float | None = None
    new_price: float | None = None
    title: str = ""
    url: str = ""
    reason: str = ""

    @classmethod
    def unchanged(cls, target: str, observation: Observation) -> "CycleResult":
        return cls(
            target=target,
            status=CycleStatus.UNCHANGED,
            old_price=observation.price,
            new_price=observation.price,
            title=observation.title,
            url=observation.resolved_url,
        )

    @classmethod
    def updated(
        cls, target: str, old_price: float, observation: Observation,
    ) -> "CycleResult":
        return cls(
            target=target,
            status=CycleStatus.UPDATED,
            old_price=old_price,
            new_price=observation.price,
            title=observation.title,
            url=observation.resolved_url,
        )

    @classmethod
    def failed(cls, target: str, reason: str) -> "CycleResult":
        return cls(target=target, status=CycleStatus.FAILED, reason=reason)

    @property
    def ok(self) -> bool:
        """True unless the cycle failed."""
        return self.status is not CycleStatus.FAILED
