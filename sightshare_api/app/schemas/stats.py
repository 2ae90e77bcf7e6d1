"""Schemas for the aggregate counters shown on the admin dashboard."""

from pydantic import BaseModel, ConfigDict, Field


class Stats(BaseModel):
    """Totals across both tables, serialized with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    total_guests: int = Field(0, alias="totalGuests")
    total_orders: int = Field(0, alias="totalOrders")
    total_photos_ordered: int = Field(0, alias="totalPhotosOrdered")


class StatsResponse(BaseModel):
    success: bool = True
    stats: Stats
