"""
The working list of records waiting to be exported.
"""
import logging
import sqlite3
from typing import Iterable, Iterator, List, Optional

from .database import (
    db_clear_records,
    db_delete_record,
    db_insert_record,
    db_list_records,
)
from .models import VehicleRecord
from .schemas import validate_record

logger = logging.getLogger(__name__)


class DuplicateRecordError(ValueError):
    """A record id is already in the working list or repeated in a batch."""

    def __init__(self, record_ids: List[str]):
        self.record_ids = record_ids
        super().__init__(f"Duplicate record id(s): {', '.join(record_ids)}")


class WorkingList:
    """Ordered list of records, mirrored to SQLite when a connection is given.

    Records are only ever appended, removed or cleared; never edited in place.
    """

    def __init__(self, conn: Optional[sqlite3.Connection] = None):
        self._conn = conn
        self._records: List[VehicleRecord] = db_list_records(conn) if conn else []

    def _check_new(self, records: List[VehicleRecord]) -> None:
        """Validate a batch before anything is stored.

        Raises ``pydantic.ValidationError`` or ``DuplicateRecordError``.
        """
        for record in records:
            validate_record(record)
        seen = {r.id for r in self._records}
        duplicates = []
        for record in records:
            if record.id in seen and record.id not in duplicates:
                duplicates.append(record.id)
            seen.add(record.id)
        if duplicates:
            raise DuplicateRecordError(duplicates)

    def add(self, record: VehicleRecord) -> None:
        self.add_many([record])

    def add_many(self, records: Iterable[VehicleRecord]) -> None:
        """Append records in order; nothing is added if any one is rejected."""
        records = list(records)
        self._check_new(records)
        for record in records:
            if self._conn is not None:
                db_insert_record(self._conn, record)
            self._records.append(record)
            logger.debug(f"Added record {record.id} ({record.vehicle.brand} {record.vehicle.model})")

    def remove(self, record_id: str) -> bool:
        """Remove a record by id. Unknown ids are ignored."""
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        if self._conn is not None:
            db_delete_record(self._conn, record_id)
        removed = len(self._records) < before
        if not removed:
            logger.debug(f"No record with id {record_id}")
        return removed

    def clear(self) -> None:
        if self._conn is not None:
            db_clear_records(self._conn)
        self._records = []

    def snapshot(self) -> List[VehicleRecord]:
        """Return a shallow copy of the current records, in order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VehicleRecord]:
        return iter(self.snapshot())
