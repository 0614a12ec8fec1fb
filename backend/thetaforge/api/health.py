"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from thetaforge.engine.registry import get_registry
from thetaforge.engine.taxonomy import TAXONOMY
from thetaforge.models.responses import DemoResponse, HealthResponse
from thetaforge.samples import DEMO_TEXT

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        transforms_registered=get_registry().count,
    )


@router.get("/taxonomy")
async def taxonomy() -> dict[str, list[str]]:
    return {category: list(props) for category, props in TAXONOMY.items()}


@router.get("/demo", response_model=DemoResponse)
async def demo() -> DemoResponse:
    return DemoResponse(text=DEMO_TEXT)
