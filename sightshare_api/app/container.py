"""Dependency container wiring the database handle into the services."""

from dataclasses import dataclass

from sightshare_api.app.core.config import Settings
from sightshare_api.app.core.db import Database
from sightshare_api.app.services.export_service import ExportService
from sightshare_api.app.services.guest_service import GuestService
from sightshare_api.app.services.order_service import OrderService
from sightshare_api.app.services.statistics_service import StatisticsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies for the lifetime of the process."""

    settings: Settings
    database: Database
    guest_service: GuestService
    order_service: OrderService
    export_service: ExportService
    statistics_service: StatisticsService

    def close(self) -> None:
        self.database.close()


def build_container(settings: Settings, database: Database) -> AppContainer:
    """Construct every service around one shared ``Database``."""
    return AppContainer(
        settings=settings,
        database=database,
        guest_service=GuestService(database),
        order_service=OrderService(database),
        export_service=ExportService(database),
        statistics_service=StatisticsService(database),
    )
