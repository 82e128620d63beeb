"""Mini README: Snapshot persistence for the fleet store.

Structure:
    * JSONSnapshot - reads and writes the whole ordered fleet as a JSON list.

Writes go to a temporary sibling file that is then moved over the target, so
an interrupted save never truncates the previous snapshot. Reads trust the
stored expenses; they are not re-validated against the purchase price.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional

from ..logging_utils import get_logger
from .errors import PersistenceError, SnapshotError
from .records import BoatRecord

LOGGER = get_logger(__name__)


class JSONSnapshot:
    """File-based snapshot of an ordered collection of boat records."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[List[BoatRecord]]:
        """Return stored records, or ``None`` when no snapshot exists yet."""

        if not self._path.exists():
            return None
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as error:
            raise SnapshotError(f"Corrupted snapshot data in {self._path}") from error
        except (OSError, UnicodeDecodeError) as error:
            raise SnapshotError(f"Unable to read snapshot {self._path}") from error

        if not isinstance(payload, list):
            raise SnapshotError(f"Expected a list of boats in {self._path}")
        records: List[BoatRecord] = []
        for position, entry in enumerate(payload):
            try:
                records.append(BoatRecord.from_dict(entry))
            except (KeyError, TypeError, ValueError) as error:
                raise SnapshotError(
                    f"Invalid boat entry #{position + 1} in {self._path}: {error}"
                ) from error
        LOGGER.debug("Decoded %s boats from %s", len(records), self._path)
        return records

    def save(self, records: Iterable[BoatRecord]) -> None:
        """Write all records, replacing any existing snapshot."""

        temp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        payload = [record.to_dict() for record in records]
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
                handle.flush()
            temp_path.replace(self._path)
        except OSError as error:
            temp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Unable to write snapshot {self._path}: {error}") from error
        LOGGER.debug("Encoded %s boats to %s", len(payload), self._path)
