"""
Guest endpoints.

The gallery front end posts a check-in when a visitor opens a gallery;
the admin dashboard and the desktop client list and delete them.
"""

from fastapi import APIRouter, Depends, Path

from sightshare_api.app.api.deps import get_guest_service
from sightshare_api.app.core.db import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER
from sightshare_api.app.schemas.common import ClearedResponse, CreatedResponse, MessageResponse
from sightshare_api.app.schemas.guest import GuestCreate, GuestListResponse
from sightshare_api.app.services.guest_service import GuestService

router = APIRouter()


@router.post("", response_model=CreatedResponse)
async def create_guest(
    guest_in: GuestCreate,
    service: GuestService = Depends(get_guest_service),
) -> CreatedResponse:
    """Save a guest check-in.

    Responds with HTTP 400 if ``name``, ``email``, ``galleryName`` or
    ``galleryId`` is missing.
    """
    guest_id = await service.create(guest_in)
    return CreatedResponse(id=guest_id, message="Guest info saved successfully")


@router.get("", response_model=GuestListResponse)
async def list_guests(service: GuestService = Depends(get_guest_service)) -> GuestListResponse:
    """Return all guests, newest first."""
    guests = await service.list_all()
    return GuestListResponse(guests=guests)


@router.delete("/{guest_id}", response_model=MessageResponse)
async def delete_guest(
    guest_id: int = Path(..., ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    service: GuestService = Depends(get_guest_service),
) -> MessageResponse:
    """Delete one guest.  Unknown ids succeed as well."""
    await service.delete_one(guest_id)
    return MessageResponse(message="Guest deleted")


@router.delete("", response_model=ClearedResponse)
async def clear_guests(service: GuestService = Depends(get_guest_service)) -> ClearedResponse:
    """Delete every guest and report how many were removed."""
    deleted = await service.delete_all()
    return ClearedResponse(message="All guests cleared", deleted=deleted)
