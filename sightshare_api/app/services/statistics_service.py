"""
Service layer for dashboard statistics.

Three independent read-only aggregates: number of guests, number of
orders and the total number of photos ordered.  They are gathered
together; if any of them fails the whole call fails with the
``StorageError`` raised by the database layer.
"""

from __future__ import annotations

import asyncio

from sightshare_api.app.core.db import Database
from sightshare_api.app.schemas.stats import Stats


class StatisticsService:
    """Aggregated counters across the guests and orders tables."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def _scalar(self, sql: str) -> int:
        value = self.database.fetch_value(sql)
        return int(value or 0)

    async def get_stats(self) -> Stats:
        results = await asyncio.gather(
            self._scalar("SELECT COUNT(*) FROM guests"),
            self._scalar("SELECT COUNT(*) FROM orders"),
            self._scalar("SELECT COALESCE(SUM(photo_count), 0) FROM orders"),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        total_guests, total_orders, total_photos = results
        return Stats(
            total_guests=total_guests,
            total_orders=total_orders,
            total_photos_ordered=total_photos,
        )
