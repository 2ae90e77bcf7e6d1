"""
SQLite database integration.

This module owns the single connection the application uses.  A
``Database`` is constructed once at process start (see the lifespan in
``main.py``), handed to every service, and closed on shutdown.  The
schema is created on open with ``CREATE TABLE IF NOT EXISTS`` so
restarting never touches existing data.

All statements take bound parameters.  Any error raised by the driver
while binding or running a statement is logged and re-raised as
:class:`~sightshare_api.app.core.exceptions.StorageError`.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .config import Settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Besides sqlite3.Error the driver raises OverflowError for integers wider
# than 64 bits and UnicodeEncodeError (a ValueError) for unencodable text.
DRIVER_ERRORS = (sqlite3.Error, OverflowError, ValueError)

# Range of an SQLite INTEGER, and so of every row id.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS guests (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    gallery_name TEXT NOT NULL,
    gallery_id TEXT NOT NULL,
    visit_date TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS orders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    gallery_name TEXT NOT NULL,
    gallery_id TEXT NOT NULL,
    photo_count INTEGER NOT NULL,
    photos TEXT NOT NULL,
    submitted_at TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_orders_gallery_id ON orders(gallery_id);
"""


def get_database_path(settings: Settings) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as is; relative paths are
    resolved against the current working directory.
    """
    db_url = settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    return str((Path.cwd() / db_url).resolve())


@dataclass
class ExecuteResult:
    """Outcome of a write statement."""

    lastrowid: Optional[int]
    rowcount: int


class Database:
    """Thin wrapper around one ``sqlite3`` connection.

    Usable as a context manager; leaving the ``with`` block closes the
    connection.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        try:
            # FastAPI may run the lifespan and the handlers on different
            # threads, the connection is still used by one request at a time.
            self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
                path, check_same_thread=False
            )
        except DRIVER_ERRORS as exc:
            logger.exception("Error opening database %s", path)
            raise StorageError(str(exc)) from exc
        # Return rows as dict‑like objects keyed by column name
        self._conn.row_factory = sqlite3.Row
        logger.info("Connected to SQLite database at %s", path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(get_database_path(settings))

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Database connection is closed")
        return self._conn

    def init_db(self) -> None:
        """Create the ``guests`` and ``orders`` tables if they are missing."""
        try:
            self.connection.executescript(SCHEMA)
            self.connection.commit()
        except DRIVER_ERRORS as exc:
            logger.exception("Error initialising database tables")
            raise StorageError(str(exc)) from exc
        logger.info("Database tables initialized")

    def execute(self, sql: str, params: Sequence[Any] = ()) -> ExecuteResult:
        """Run a single write statement and commit it."""
        conn = self.connection
        try:
            cursor = conn.execute(sql, tuple(params))
            conn.commit()
        except DRIVER_ERRORS as exc:
            conn.rollback()
            logger.exception("Error executing statement: %s", sql.strip())
            raise StorageError(str(exc)) from exc
        return ExecuteResult(lastrowid=cursor.lastrowid, rowcount=cursor.rowcount)

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        try:
            return self.connection.execute(sql, tuple(params)).fetchall()
        except DRIVER_ERRORS as exc:
            logger.exception("Error running query: %s", sql.strip())
            raise StorageError(str(exc)) from exc

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        try:
            return self.connection.execute(sql, tuple(params)).fetchone()
        except DRIVER_ERRORS as exc:
            logger.exception("Error running query: %s", sql.strip())
            raise StorageError(str(exc)) from exc

    def fetch_value(self, sql: str, params: Sequence[Any] = ()) -> Any:
        """Return the first column of the first row, or ``None``."""
        row = self.fetch_one(sql, params)
        return row[0] if row is not None else None

    def close(self) -> None:
        """Commit pending work and close the connection.  Safe to call twice."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            conn.commit()
        finally:
            conn.close()
        logger.info("Database connection closed")
