"""HTTP layer: coaster routes and the admin page, merged into one router."""
from fastapi import APIRouter

from . import admin, routes

router = APIRouter()
router.include_router(routes.router, tags=["coasters"])
router.include_router(admin.router, tags=["admin"])

__all__ = ["router"]
