"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProcessRequest(BaseModel):
    text: str = Field(..., description="Document text to process")
    seed: int | None = Field(default=None, description="Seed for the Stage 4 random source")
    skip: list[str] = Field(
        default_factory=list,
        description="Transform IDs to skip (e.g., ['S4.01']); steps that need a skipped one are skipped too",
    )


class ImageAnalysisRequest(BaseModel):
    image_base64: str = Field(..., description="Base64-encoded image bytes (data URL prefix allowed)")
    mime_type: str = Field(default="image/png", description="Image MIME type")
    seed: int | None = Field(default=None, description="Seed for the Stage 4 random source")
