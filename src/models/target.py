# src/models/target.py

"""Target descriptor model: one monitored product page."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class PreClick:
    """Navigate to ``root_url`` and click ``click_selector`` to reach the product."""

    root_url: str
    click_selector: str


@dataclass(frozen=True)
class TargetDescriptor:
    """Static description of one monitored page.

    Exactly one of ``product_url`` / ``pre_click`` must be set.
    """

    title_selector: str
    price_selector: str
    state_path: str
    product_url: str | None = None
    pre_click: PreClick | None = None

    def __post_init__(self) -> None:
        if (self.product_url is None) == (self.pre_click is None):
            msg = (
                f"Target '{self.state_path}' must set exactly one of "
                "productURL or preClick"
            )
            raise ValueError(msg)
        for field_name in ("title_selector", "price_selector", "state_path"):
            if not getattr(self, field_name):
                msg = f"Target is missing required field '{field_name}'"
                raise ValueError(msg)

    @property
    def entry_url(self) -> str:
        """The first URL the browser visits for this target."""
        if self.pre_click is not None:
            return self.pre_click.root_url
        return self.product_url or ""

    @property
    def label(self) -> str:
        """Short human-readable name derived from the state path."""
        return Path(self.state_path).stem

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TargetDescriptor":
        """Build a descriptor from a camelCase configuration entry."""
        raw_pre_click = data.get("preClick")
        pre_click = None
        if raw_pre_click:
            pre_click = PreClick(
                root_url=raw_pre_click["rootURL"],
                click_selector=raw_pre_click["clickSelector"],
            )
        return cls(
            title_selector=data.get("titleSelector", ""),
            price_selector=data.get("priceSelector", ""),
            state_path=data.get("statePath", ""),
            product_url=data.get("productURL") or None,
            pre_click=pre_click,
        )
