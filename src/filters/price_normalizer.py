# src/filters/price_normalizer.py

"""Turns extracted price text into a comparable number."""

import math
import re

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")


def first_line(text: str) -> str:
    """Return the first non-blank line of *text*, stripped."""
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def normalize_price(text: str | None) -> float:
    """Parse a price like ``"$599.00"`` into ``599.0``.

    Every character except digits and ``.`` is dropped before
    parsing, so currency symbols, whitespace and thousands
    separators disappear. Returns ``nan`` when nothing parseable
    remains (e.g. ``"Free"`` or ``"1.2.3"``).
    """
    if not text:
        return math.nan
    cleaned = _NON_PRICE_CHARS.sub("", text)
    try:
        return float(cleaned)
    except ValueError:
        return math.nan
