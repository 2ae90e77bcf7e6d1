"""
CSV export of guests and orders.

The admin dashboard offers both tables as downloadable spreadsheets.
Every text value is wrapped in double quotes and numeric columns (the
id and the photo count) are written bare.  Quotes inside a value are
doubled as in RFC 4180, so names such as ``Ann "Nan" Lee`` keep their
column alignment when opened in a spreadsheet.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence

from sightshare_api.app.core.db import Database

GUEST_HEADER = [
    "ID",
    "Name",
    "Email",
    "Gallery Name",
    "Gallery ID",
    "Visit Date",
    "Created At",
]
ORDER_HEADER = [
    "ID",
    "Name",
    "Email",
    "Gallery Name",
    "Gallery ID",
    "Photo Count",
    "Submitted At",
    "Created At",
]


@dataclass
class CsvExport:
    """A rendered CSV document and the filename suggested for download."""

    filename: str
    content: str
    media_type: str = "text/csv"

    @property
    def content_disposition(self) -> str:
        return f"attachment; filename={self.filename}"


def render_csv(header: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    buffer = io.StringIO()
    buffer.write(",".join(header) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


class ExportService:
    """Renders stored rows as CSV, newest first."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def export_guests_csv(self) -> CsvExport:
        rows = self.database.fetch_all(
            "SELECT * FROM guests ORDER BY created_at DESC, id DESC"
        )
        records: List[List[Any]] = [
            [
                row["id"],
                row["name"],
                row["email"],
                row["gallery_name"],
                row["gallery_id"],
                row["visit_date"],
                row["created_at"],
            ]
            for row in rows
        ]
        return CsvExport(filename="guests.csv", content=render_csv(GUEST_HEADER, records))

    async def export_orders_csv(self) -> CsvExport:
        """Export orders with their photo count; the photo list itself is left out."""
        rows = self.database.fetch_all(
            "SELECT * FROM orders ORDER BY created_at DESC, id DESC"
        )
        records: List[List[Any]] = [
            [
                row["id"],
                row["name"],
                row["email"],
                row["gallery_name"],
                row["gallery_id"],
                row["photo_count"],
                row["submitted_at"],
                row["created_at"],
            ]
            for row in rows
        ]
        return CsvExport(filename="orders.csv", content=render_csv(ORDER_HEADER, records))
