"""Liveness probe."""

from typing import Dict

from fastapi import APIRouter

from sightshare_api.app.services.common import utc_timestamp

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, str]:
    """Return ``ok`` and the server time."""
    return {"status": "ok", "timestamp": utc_timestamp()}
