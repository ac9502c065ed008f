"""Central API router composition.

This module mounts individual route modules on the main app router and
provides a single import point for `FastAPI.include_router(...)`.
"""

from fastapi import APIRouter

from .schools import router as schools_router

router = APIRouter()

router.include_router(schools_router)
