"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from thetaforge.api import health, image, process

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(process.router)
api_router.include_router(image.router)
