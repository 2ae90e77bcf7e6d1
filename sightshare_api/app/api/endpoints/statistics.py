"""Aggregate counters for the admin dashboard."""

from fastapi import APIRouter, Depends

from sightshare_api.app.api.deps import get_statistics_service
from sightshare_api.app.schemas.stats import StatsResponse
from sightshare_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("", response_model=StatsResponse)
async def get_stats(
    service: StatisticsService = Depends(get_statistics_service),
) -> StatsResponse:
    """Return total guests, total orders and total photos ordered."""
    stats = await service.get_stats()
    return StatsResponse(stats=stats)
