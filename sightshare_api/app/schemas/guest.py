"""
Pydantic schemas for guest check-ins.

A guest record is written when a visitor opens a gallery.  All four
identifying fields are declared optional here so that a missing value
reaches ``GuestService.create`` and is reported as a validation error
(HTTP 400) instead of FastAPI's default 422.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from sightshare_api.app.schemas.common import TextValue


class GuestCreate(BaseModel):
    """Schema for submitting a guest check-in."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Ann"])
    email: Optional[str] = Field(None, examples=["ann@example.com"])
    gallery_name: Optional[str] = Field(None, alias="galleryName", examples=["Spring"])
    gallery_id: Optional[TextValue] = Field(None, alias="galleryId", examples=["g1"])
    visit_date: Optional[TextValue] = Field(
        None,
        alias="visitDate",
        description="ISO timestamp of the visit; defaults to the time of submission",
    )


class GuestRead(BaseModel):
    """Schema for reading a guest from the API."""

    id: int
    name: str
    email: str
    gallery_name: str
    gallery_id: str
    visit_date: str
    created_at: Optional[str]


class GuestListResponse(BaseModel):
    success: bool = True
    guests: List[GuestRead]
