"""
SQLite storage for the working list of vehicle records.
"""
import json
import logging
import sqlite3
from dataclasses import asdict
from typing import List

from pydantic import ValidationError

from .models import VehicleRecord
from .schemas import parse_record
from .utils import now_iso

logger = logging.getLogger(__name__)


# Schema definitions
DDL_RECORDS = """
CREATE TABLE IF NOT EXISTS records (
  record_id TEXT PRIMARY KEY,
  position INTEGER NOT NULL,
  payload TEXT NOT NULL,
  added_at TEXT
);
"""

DDL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_records_position ON records(position);",
]


def db_connect(path: str) -> sqlite3.Connection:
    """Create database connection with optimized settings."""
    conn = sqlite3.connect(path)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def db_init(conn: sqlite3.Connection):
    """Initialize database schema with tables and indexes."""
    conn.execute(DDL_RECORDS)
    for ddl in DDL_INDEXES:
        conn.execute(ddl)
    conn.commit()


def db_insert_record(conn: sqlite3.Connection, record: VehicleRecord):
    """Append a record after the last stored one."""
    cur = conn.cursor()
    cur.execute("SELECT COALESCE(MAX(position), -1) + 1 FROM records")
    position = cur.fetchone()[0]
    cur.execute("""
    INSERT INTO records (record_id, position, payload, added_at)
    VALUES (?, ?, ?, ?)
    """, (
        record.id, position, json.dumps(asdict(record), ensure_ascii=False), now_iso()
    ))
    conn.commit()


def db_delete_record(conn: sqlite3.Connection, record_id: str) -> bool:
    """Delete a record by id. Returns True if a row was removed."""
    cur = conn.cursor()
    cur.execute("DELETE FROM records WHERE record_id = ?", (record_id,))
    conn.commit()
    return cur.rowcount > 0


def db_clear_records(conn: sqlite3.Connection):
    conn.execute("DELETE FROM records")
    conn.commit()


def db_list_records(conn: sqlite3.Connection) -> List[VehicleRecord]:
    """Load stored records in insertion order.

    Rows whose payload no longer parses are logged and skipped.
    """
    cur = conn.cursor()
    cur.execute("SELECT record_id, payload FROM records ORDER BY position ASC")
    records = []
    for record_id, payload in cur.fetchall():
        try:
            records.append(parse_record(json.loads(payload)))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Skipping stored record {record_id}: {e}")
    return records
