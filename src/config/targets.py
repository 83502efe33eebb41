# src/config/targets.py

"""Loads the ordered list of monitored targets from targets.json."""

import json
import logging
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.models.target import TargetDescriptor

logger = logging.getLogger("price_monitor.config")


def parse_targets(entries: list[dict[str, Any]]) -> list[TargetDescriptor]:
    """Build descriptors from raw entries, preserving order.

    Raises:
        ValueError: On an invalid entry or a duplicated ``statePath``.
    """
    targets: list[TargetDescriptor] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            msg = f"Target #{index} must be a JSON object"
            raise ValueError(msg)
        try:
            target = TargetDescriptor.from_dict(entry)
        except KeyError as exc:
            msg = f"Target #{index} is missing key {exc}"
            raise ValueError(msg) from exc
        if target.state_path in seen:
            msg = f"Duplicate statePath '{target.state_path}'"
            raise ValueError(msg)
        seen.add(target.state_path)
        targets.append(target)
    return targets


def load_targets(path: Path | None = None) -> list[TargetDescriptor]:
    """Read and validate the target configuration file."""
    config_path = path or Settings.TARGETS_PATH
    with open(config_path, encoding="utf-8") as f:
        entries: Any = json.load(f)
    if not isinstance(entries, list):
        msg = f"{config_path} must contain a JSON list of targets"
        raise ValueError(msg)
    targets = parse_targets(entries)
    logger.debug(
        "Loaded %d target(s) from %s", len(targets), config_path
    )
    return targets
