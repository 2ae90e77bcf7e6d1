"""
Order endpoints.

``GET /orders/{gallery_id}`` and ``DELETE /orders/{order_id}`` share a
path shape but not a method: the former filters by gallery, the latter
removes one order by its numeric id.
"""

from fastapi import APIRouter, Depends, Path

from sightshare_api.app.api.deps import get_order_service
from sightshare_api.app.core.db import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER
from sightshare_api.app.schemas.common import ClearedResponse, CreatedResponse, MessageResponse
from sightshare_api.app.schemas.order import OrderCreate, OrderListResponse
from sightshare_api.app.services.order_service import OrderService

router = APIRouter()


@router.post("", response_model=CreatedResponse)
async def create_order(
    order_in: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> CreatedResponse:
    """Submit the favourite photos of a guest."""
    order_id = await service.create(order_in)
    return CreatedResponse(id=order_id, message="Order submitted successfully")


@router.get("", response_model=OrderListResponse)
async def list_orders(service: OrderService = Depends(get_order_service)) -> OrderListResponse:
    orders = await service.list_all()
    return OrderListResponse(orders=orders)


@router.get("/{gallery_id}", response_model=OrderListResponse)
async def list_gallery_orders(
    gallery_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderListResponse:
    """Return the orders of one gallery; an unknown gallery yields an empty list."""
    orders = await service.list_by_gallery(gallery_id)
    return OrderListResponse(orders=orders)


@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(
    order_id: int = Path(..., ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    await service.delete_one(order_id)
    return MessageResponse(message="Order deleted")


@router.delete("", response_model=ClearedResponse)
async def clear_orders(service: OrderService = Depends(get_order_service)) -> ClearedResponse:
    deleted = await service.delete_all()
    return ClearedResponse(message="All orders cleared", deleted=deleted)
