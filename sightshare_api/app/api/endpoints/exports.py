"""CSV downloads for the admin dashboard."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from sightshare_api.app.api.deps import get_export_service
from sightshare_api.app.services.export_service import CsvExport, ExportService

router = APIRouter()


def _csv_response(export: CsvExport) -> Response:
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": export.content_disposition},
    )


@router.get("/guests", response_class=Response)
async def export_guests(service: ExportService = Depends(get_export_service)) -> Response:
    return _csv_response(await service.export_guests_csv())


@router.get("/orders", response_class=Response)
async def export_orders(service: ExportService = Depends(get_export_service)) -> Response:
    return _csv_response(await service.export_orders_csv())
