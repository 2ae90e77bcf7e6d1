"""Tests for the CSV export service."""

import asyncio

from sightshare_api.app.services.export_service import render_csv
from tests.conftest import make_guest, make_order


def test_export_guests_csv(container) -> None:
    asyncio.run(
        container.guest_service.create(make_guest(visitDate="2024-05-01T10:00:00.000Z"))
    )

    export = asyncio.run(container.export_service.export_guests_csv())

    lines = export.content.splitlines()
    assert export.filename == "guests.csv"
    assert export.media_type == "text/csv"
    assert export.content_disposition == "attachment; filename=guests.csv"
    assert lines[0] == "ID,Name,Email,Gallery Name,Gallery ID,Visit Date,Created At"
    assert lines[1].startswith('1,"Ann","a@x.com","Spring","g1","2024-05-01T10:00:00.000Z","')
    assert len(lines) == 2


def test_export_orders_csv_has_count_not_photos(container) -> None:
    asyncio.run(
        container.order_service.create(
            make_order(photos=["secret-photo", "p2"], submittedAt="2024-05-01T10:00:00.000Z")
        )
    )

    export = asyncio.run(container.export_service.export_orders_csv())

    lines = export.content.splitlines()
    assert export.filename == "orders.csv"
    assert lines[0] == (
        "ID,Name,Email,Gallery Name,Gallery ID,Photo Count,Submitted At,Created At"
    )
    assert lines[1].startswith('1,"Ann","a@x.com","Spring","g1",2,"2024-05-01T10:00:00.000Z","')
    assert "secret-photo" not in export.content


def test_export_newest_first(container) -> None:
    asyncio.run(container.guest_service.create(make_guest(name="Old")))
    asyncio.run(container.guest_service.create(make_guest(name="New")))

    lines = asyncio.run(container.export_service.export_guests_csv()).content.splitlines()

    assert '"New"' in lines[1]
    assert '"Old"' in lines[2]


def test_export_empty_table_is_header_only(container) -> None:
    export = asyncio.run(container.export_service.export_orders_csv())

    assert export.content.splitlines() == [
        "ID,Name,Email,Gallery Name,Gallery ID,Photo Count,Submitted At,Created At"
    ]


def test_render_csv_escapes_quotes_and_delimiters() -> None:
    content = render_csv(["ID", "Name"], [[7, 'Ann "Nan", Lee']])

    assert content == 'ID,Name\n7,"Ann ""Nan"", Lee"\n'
