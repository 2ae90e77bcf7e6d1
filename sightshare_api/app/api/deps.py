"""
FastAPI dependencies resolving services from the application container.

The container is created in the lifespan of ``main.create_app`` and
stored on ``app.state``; handlers ask for the one service they need.
"""

from fastapi import Request

from sightshare_api.app.container import AppContainer
from sightshare_api.app.services.export_service import ExportService
from sightshare_api.app.services.guest_service import GuestService
from sightshare_api.app.services.order_service import OrderService
from sightshare_api.app.services.statistics_service import StatisticsService


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_guest_service(request: Request) -> GuestService:
    return get_container(request).guest_service


def get_order_service(request: Request) -> OrderService:
    return get_container(request).order_service


def get_export_service(request: Request) -> ExportService:
    return get_container(request).export_service


def get_statistics_service(request: Request) -> StatisticsService:
    return get_container(request).statistics_service
