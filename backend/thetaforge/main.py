"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thetaforge.config import settings
from thetaforge.engine.registry import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.thetaforge_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="ThetaForge",
        description="Four-stage document engine — property tagging, logic rules, helix geometry, superposition",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    load_transforms()

    from thetaforge.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
