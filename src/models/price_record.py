# src/models/price_record.py

"""Persisted last-observed price for a single target."""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass
class PriceRecord:
    """The last observation stored for a target.

    A ``price`` of ``0`` means "never observed".
    """

    price: float
    name: str = ""
    timestamp: str | None = None

    @classmethod
    def empty(cls) -> "PriceRecord":
        """Default used when no prior observation exists."""
        return cls(price=0, name="", timestamp=None)

    @classmethod
    def observed_now(cls, price: float, name: str) -> "PriceRecord":
        """Build a record stamped with the current UTC time."""
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        return cls(price=price, name=name, timestamp=stamp)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the on-disk JSON shape."""
        data: dict[str, Any] = {"price": self.price, "name": self.name}
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "PriceRecord":
        """Parse the on-disk JSON shape.

        Raises:
            ValueError: If ``data`` is not an object with a numeric price.
        """
        if not isinstance(data, dict):
            msg = f"Expected a JSON object, got {type(data).__name__}"
            raise ValueError(msg)
        price = data.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            msg = f"Field 'price' must be a number, got {price!r}"
            raise ValueError(msg)
        try:
            value = float(price)
        except OverflowError as exc:
            msg = "Field 'price' is too large"
            raise ValueError(msg) from exc
        if not math.isfinite(value):
            msg = f"Field 'price' must be finite, got {price!r}"
            raise ValueError(msg)
        name = data.get("name", "")
        timestamp = data.get("timestamp")
        return cls(
            price=value,
            name=name if isinstance(name, str) else str(name),
            timestamp=timestamp if isinstance(timestamp, str) else None,
        )
