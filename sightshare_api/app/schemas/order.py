"""
Pydantic schemas for photo orders.

An order is the set of photos a guest marked as favourites in a
gallery.  Each photo is either a plain identifier or a descriptor
object supplied by the gallery front end; the list is stored as JSON
text and parsed back on every read.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from sightshare_api.app.schemas.common import TextValue

PhotoRef = Union[StrictStr, StrictInt, Dict[str, Any]]


class OrderCreate(BaseModel):
    """Schema for submitting an order."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Ann"])
    email: Optional[str] = Field(None, examples=["ann@example.com"])
    gallery_name: Optional[str] = Field(None, alias="galleryName", examples=["Spring"])
    gallery_id: Optional[TextValue] = Field(None, alias="galleryId", examples=["g1"])
    photos: Optional[List[PhotoRef]] = Field(
        None, description="Ordered list of photo identifiers or descriptors"
    )
    submitted_at: Optional[TextValue] = Field(
        None,
        alias="submittedAt",
        description="ISO timestamp of the submission; defaults to the time it was received",
    )


class OrderRead(BaseModel):
    """Schema for reading an order from the API."""

    id: int
    name: str
    email: str
    gallery_name: str
    gallery_id: str
    photo_count: int
    photos: List[PhotoRef]
    submitted_at: str
    created_at: Optional[str]


class OrderListResponse(BaseModel):
    success: bool = True
    orders: List[OrderRead]
