"""Tests for the order service."""

import asyncio

import pytest

from sightshare_api.app.core.exceptions import ValidationError
from tests.conftest import count_rows, make_order


def test_photos_round_trip(container) -> None:
    service = container.order_service

    asyncio.run(service.create(make_order(photos=["p1", "p2", "p3"])))

    order = asyncio.run(service.list_all())[0]
    assert order.photo_count == 3
    assert order.photos == ["p1", "p2", "p3"]


def test_photo_descriptors_round_trip(container) -> None:
    photos = [{"id": "p1", "url": "https://cdn.example.com/p1.jpg"}, 42, "p3"]

    asyncio.run(container.order_service.create(make_order(photos=photos)))

    order = asyncio.run(container.order_service.list_all())[0]
    assert order.photos == photos
    assert order.photo_count == 3


def test_photos_stored_as_json_text(container, database) -> None:
    asyncio.run(container.order_service.create(make_order(photos=["a", "b"])))

    row = database.fetch_one("SELECT photo_count, photos FROM orders")
    assert row["photo_count"] == 2
    assert row["photos"] == '["a", "b"]'


def test_create_defaults_submitted_at(container) -> None:
    asyncio.run(container.order_service.create(make_order()))
    asyncio.run(
        container.order_service.create(make_order(submittedAt="2024-05-01T10:00:00.000Z"))
    )

    newest, oldest = asyncio.run(container.order_service.list_all())
    assert newest.submitted_at == "2024-05-01T10:00:00.000Z"
    assert oldest.submitted_at.endswith("Z")


@pytest.mark.parametrize("field", ["name", "email", "galleryName", "galleryId", "photos"])
def test_create_rejects_missing_fields(container, database, field) -> None:
    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(container.order_service.create(make_order(**{field: None})))

    assert excinfo.value.missing == [field]
    assert count_rows(database, "orders") == 0


def test_create_rejects_empty_photo_list(container, database) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(container.order_service.create(make_order(photos=[])))

    assert count_rows(database, "orders") == 0


def test_list_by_gallery_filters_exactly(container) -> None:
    service = container.order_service
    g1_first = asyncio.run(service.create(make_order(galleryId="g1")))
    asyncio.run(service.create(make_order(galleryId="g2")))
    asyncio.run(service.create(make_order(galleryId="g10")))
    g1_second = asyncio.run(service.create(make_order(galleryId="g1")))

    orders = asyncio.run(service.list_by_gallery("g1"))

    assert [order.id for order in orders] == [g1_second, g1_first]
    assert all(order.gallery_id == "g1" for order in orders)


def test_list_by_unknown_gallery_is_empty(container) -> None:
    asyncio.run(container.order_service.create(make_order()))

    assert asyncio.run(container.order_service.list_by_gallery("nope")) == []


def test_delete_one_and_all(container, database) -> None:
    service = container.order_service
    first = asyncio.run(service.create(make_order()))
    asyncio.run(service.create(make_order()))

    assert asyncio.run(service.delete_one(first)) == 1
    assert asyncio.run(service.delete_one(999)) == 0
    assert asyncio.run(service.delete_all()) == 1
    assert asyncio.run(service.delete_all()) == 0
    assert count_rows(database, "orders") == 0
