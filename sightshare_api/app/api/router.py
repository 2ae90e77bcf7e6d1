"""
Top‑level router for the ``/api`` prefix.

Aggregates the domain routers.  Guest and order collections live under
``/guests`` and ``/orders``; the CSV downloads share the ``/export``
prefix so the dashboard can link to them directly.
"""

from fastapi import APIRouter

from .endpoints import exports, guests, health, orders, statistics

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(guests.router, prefix="/guests", tags=["guests"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(exports.router, prefix="/export", tags=["export"])
router.include_router(statistics.router, prefix="/stats", tags=["statistics"])
