"""Tests for the statistics service."""

import asyncio

import pytest

from sightshare_api.app.core.exceptions import StorageError
from tests.conftest import make_guest, make_order


def test_stats_on_empty_database(container) -> None:
    stats = asyncio.run(container.statistics_service.get_stats())

    assert stats.total_guests == 0
    assert stats.total_orders == 0
    assert stats.total_photos_ordered == 0


def test_stats_counts_rows_and_photos(container) -> None:
    asyncio.run(container.guest_service.create(make_guest()))
    asyncio.run(container.order_service.create(make_order(photos=["a", "b", "c"])))
    asyncio.run(container.order_service.create(make_order(photos=["d", "e"])))

    stats = asyncio.run(container.statistics_service.get_stats())

    assert stats.total_guests == 1
    assert stats.total_orders == 2
    assert stats.total_photos_ordered == 5


def test_stats_serialize_with_camel_case(container) -> None:
    stats = asyncio.run(container.statistics_service.get_stats())

    assert stats.model_dump(by_alias=True) == {
        "totalGuests": 0,
        "totalOrders": 0,
        "totalPhotosOrdered": 0,
    }


def test_stats_fail_as_a_whole(container, database) -> None:
    database.execute("DROP TABLE orders")

    with pytest.raises(StorageError):
        asyncio.run(container.statistics_service.get_stats())
