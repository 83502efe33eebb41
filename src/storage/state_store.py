# src/storage/state_store.py

"""JSON state files holding the last observed price of each target."""

import json
import logging
import os
import tempfile
from pathlib import Path

from src.config.settings import Settings
from src.models.errors import PersistenceReadError, PersistenceWriteError
from src.models.price_record import PriceRecord


class PriceStateStore:
    """Reads and overwrites one JSON record per target.

    Relative state paths resolve under ``Settings.STATE_DIR``.
    """

    def __init__(
        self,
        state_dir: Path | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.state_dir: Path = state_dir or Settings.STATE_DIR
        self.logger = logger or logging.getLogger("price_monitor.storage")

    def resolve(self, state_path: str | Path) -> Path:
        """Map a descriptor's state path to a file on disk."""
        path = Path(state_path)
        if path.is_absolute():
            return path
        return self.state_dir / path

    # ── Strict API ───────────────────────────────────────

    def read(self, state_path: str | Path) -> PriceRecord | None:
        """Return the stored record, or ``None`` if no file exists.

        Raises:
            PersistenceReadError: The file exists but cannot be parsed.
        """
        path = self.resolve(state_path)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return PriceRecord.from_dict(data)
        except (OSError, ValueError, RecursionError) as exc:
            # RecursionError: pathologically nested JSON
            msg = f"Cannot read state file {path}: {exc}"
            raise PersistenceReadError(msg) from exc

    def write(self, state_path: str | Path, record: PriceRecord) -> Path:
        """Replace the state file's content with *record*.

        The record is written to a sibling temp file first and moved
        into place, so readers never see a half-written file.

        Raises:
            PersistenceWriteError: The file could not be written.
        """
        path = self.resolve(state_path)
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record.to_dict(), f, ensure_ascii=False)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            msg = f"Cannot write state file {path}: {exc}"
            raise PersistenceWriteError(msg) from exc
        return path

    # ── Lenient API (used by the monitor) ────────────────

    def load(self, state_path: str | Path) -> PriceRecord | None:
        """Like :meth:`read`, but a malformed file is logged and treated as absent."""
        try:
            record = self.read(state_path)
        except PersistenceReadError as exc:
            self.logger.warning("%s; treating as no prior observation", exc)
            return None
        if record is None:
            self.logger.debug("No state file for %s yet", state_path)
        return record

    def save(self, state_path: str | Path, record: PriceRecord) -> bool:
        """Like :meth:`write`, but returns ``False`` instead of raising."""
        try:
            path = self.write(state_path, record)
        except PersistenceWriteError as exc:
            self.logger.error("%s", exc, exc_info=True)
            return False
        self.logger.info(
            "Saved price %.2f for '%s' to %s",
            record.price,
            record.name,
            path,
        )
        return True
