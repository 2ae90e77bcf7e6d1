"""
Service layer for photo orders.

An order records the photos a guest picked in one gallery.  The photo
list is stored as JSON text in the ``photos`` column together with its
length in ``photo_count``, so aggregates never have to parse JSON.
Conversion between the list and its text form happens only in this
module: ``create`` encodes and ``_row_to_order_read`` decodes.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import List

from sightshare_api.app.core.db import Database
from sightshare_api.app.schemas.order import OrderCreate, OrderRead
from sightshare_api.app.services.common import require_fields, utc_timestamp

logger = logging.getLogger(__name__)


class OrderService:
    """CRUD operations on the ``orders`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create(self, data: OrderCreate) -> int:
        """Insert a new order and return its id.

        ``photo_count`` is always derived from ``photos``.  An empty
        photo list is rejected like any other missing field.
        """
        require_fields(
            [
                ("name", data.name),
                ("email", data.email),
                ("galleryName", data.gallery_name),
                ("galleryId", data.gallery_id),
                ("photos", data.photos),
            ]
        )
        photos = list(data.photos)
        result = self.database.execute(
            """
            INSERT INTO orders (name, email, gallery_name, gallery_id, photo_count, photos, submitted_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                data.name,
                data.email,
                data.gallery_name,
                data.gallery_id,
                len(photos),
                json.dumps(photos),
                data.submitted_at or utc_timestamp(),
            ),
        )
        logger.info(
            "Created order %s for gallery %s with %s photos",
            result.lastrowid,
            data.gallery_id,
            len(photos),
        )
        return result.lastrowid

    async def list_all(self) -> List[OrderRead]:
        """Return every order, newest first."""
        rows = self.database.fetch_all(
            "SELECT * FROM orders ORDER BY created_at DESC, id DESC"
        )
        return [self._row_to_order_read(row) for row in rows]

    async def list_by_gallery(self, gallery_id: str) -> List[OrderRead]:
        """Return the orders placed in one gallery, newest first."""
        rows = self.database.fetch_all(
            "SELECT * FROM orders WHERE gallery_id = ? ORDER BY created_at DESC, id DESC",
            (gallery_id,),
        )
        return [self._row_to_order_read(row) for row in rows]

    async def delete_one(self, order_id: int) -> int:
        result = self.database.execute("DELETE FROM orders WHERE id = ?", (order_id,))
        if result.rowcount:
            logger.info("Deleted order %s", order_id)
        return result.rowcount

    async def delete_all(self) -> int:
        result = self.database.execute("DELETE FROM orders")
        logger.info("Cleared %s orders", result.rowcount)
        return result.rowcount

    @staticmethod
    def _row_to_order_read(row: sqlite3.Row) -> OrderRead:
        """Convert a database row to an OrderRead, decoding the photo list."""
        return OrderRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            gallery_name=row["gallery_name"],
            gallery_id=row["gallery_id"],
            photo_count=row["photo_count"],
            photos=json.loads(row["photos"]),
            submitted_at=row["submitted_at"],
            created_at=row["created_at"],
        )
