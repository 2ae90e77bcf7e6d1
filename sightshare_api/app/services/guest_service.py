"""
Service layer for guest check-ins.

A guest row is written every time a visitor enters a gallery.  Rows
are never updated; they can only be listed and deleted, one at a time
or all at once.  Deleting an id that does not exist is not an error,
the caller simply gets a row count of zero.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from sightshare_api.app.core.db import Database
from sightshare_api.app.schemas.guest import GuestCreate, GuestRead
from sightshare_api.app.services.common import require_fields, utc_timestamp

logger = logging.getLogger(__name__)


class GuestService:
    """CRUD operations on the ``guests`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create(self, data: GuestCreate) -> int:
        """Insert a new guest and return its id.

        ``visit_date`` defaults to the current time when the client does
        not send one.
        """
        require_fields(
            [
                ("name", data.name),
                ("email", data.email),
                ("galleryName", data.gallery_name),
                ("galleryId", data.gallery_id),
            ]
        )
        result = self.database.execute(
            """
            INSERT INTO guests (name, email, gallery_name, gallery_id, visit_date)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                data.name,
                data.email,
                data.gallery_name,
                data.gallery_id,
                data.visit_date or utc_timestamp(),
            ),
        )
        logger.info("Created guest %s for gallery %s", result.lastrowid, data.gallery_id)
        return result.lastrowid

    async def list_all(self) -> List[GuestRead]:
        """Return every guest, newest first."""
        rows = self.database.fetch_all(
            "SELECT * FROM guests ORDER BY created_at DESC, id DESC"
        )
        return [self._row_to_guest_read(row) for row in rows]

    async def delete_one(self, guest_id: int) -> int:
        result = self.database.execute("DELETE FROM guests WHERE id = ?", (guest_id,))
        if result.rowcount:
            logger.info("Deleted guest %s", guest_id)
        return result.rowcount

    async def delete_all(self) -> int:
        result = self.database.execute("DELETE FROM guests")
        logger.info("Cleared %s guests", result.rowcount)
        return result.rowcount

    @staticmethod
    def _row_to_guest_read(row: sqlite3.Row) -> GuestRead:
        return GuestRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            gallery_name=row["gallery_name"],
            gallery_id=row["gallery_id"],
            visit_date=row["visit_date"],
            created_at=row["created_at"],
        )
