"""Tests for configuration, logging and container wiring."""

import logging

from sightshare_api.app.container import build_container
from sightshare_api.app.core.config import DEFAULT_PUBLIC_DIR, Settings, _split_origins
from sightshare_api.app.core.logging_config import setup_logging


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.database_url
    assert settings.public_dir
    assert isinstance(settings.port, int)


def test_default_public_dir_contains_admin_page() -> None:
    from pathlib import Path

    assert (Path(DEFAULT_PUBLIC_DIR) / "admin.html").is_file()


def test_split_origins() -> None:
    assert _split_origins("*") == ["*"]
    assert _split_origins("http://a.com, http://b.com,") == ["http://a.com", "http://b.com"]
    assert _split_origins(" , ") == ["*"]


def test_setup_logging_idempotent(monkeypatch, tmp_path) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug", str(tmp_path / "app.log"))
    first_count = len(root.handlers)

    setup_logging("info")
    second_count = len(root.handlers)

    assert first_count == 2
    assert second_count == 2
    assert root.level == logging.DEBUG
    for handler in root.handlers:
        handler.close()


def test_build_container_shares_database(settings, database) -> None:
    container = build_container(settings, database)

    assert container.guest_service.database is database
    assert container.order_service.database is database
    assert container.export_service.database is database
    assert container.statistics_service.database is database

    container.close()
    assert not database.is_open


def test_setup_logging_sets_access_level_even_when_configured(monkeypatch) -> None:
    root = logging.getLogger()
    access = logging.getLogger("uvicorn.access")
    monkeypatch.setattr(root, "handlers", [logging.NullHandler()])
    monkeypatch.setattr(access, "level", access.level)

    setup_logging("info", access_level="warning")

    assert access.level == logging.WARNING
    assert len(root.handlers) == 1


def test_setup_logging_unknown_level_falls_back_to_info(monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO
    for handler in root.handlers:
        handler.close()
