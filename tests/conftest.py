"""Shared test fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sightshare_api.app.container import AppContainer, build_container
from sightshare_api.app.core.config import Settings
from sightshare_api.app.core.db import Database
from sightshare_api.app.main import create_app
from sightshare_api.app.schemas.guest import GuestCreate
from sightshare_api.app.schemas.order import OrderCreate


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(database_url=str(tmp_path / "sightshare-test.db"))


@pytest.fixture
def database(settings: Settings) -> Iterator[Database]:
    with Database.from_settings(settings) as db:
        db.init_db()
        yield db


@pytest.fixture
def container(settings: Settings, database: Database) -> AppContainer:
    return build_container(settings, database)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def make_guest(**overrides) -> GuestCreate:
    payload = {
        "name": "Ann",
        "email": "a@x.com",
        "galleryName": "Spring",
        "galleryId": "g1",
    }
    payload.update(overrides)
    return GuestCreate(**payload)


def make_order(**overrides) -> OrderCreate:
    payload = {
        "name": "Ann",
        "email": "a@x.com",
        "galleryName": "Spring",
        "galleryId": "g1",
        "photos": ["p1", "p2", "p3"],
    }
    payload.update(overrides)
    return OrderCreate(**payload)


def count_rows(database: Database, table: str) -> int:
    return database.fetch_value(f"SELECT COUNT(*) FROM {table}")
