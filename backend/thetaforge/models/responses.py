"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from thetaforge.models.result import ProcessingResult, ProcessingSummary


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class DemoResponse(BaseModel):
    text: str


class ProcessResponse(BaseModel):
    result: ProcessingResult
    summary: ProcessingSummary
    report_text: str = ""
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class ImageAnalysisResponse(ProcessResponse):
    description: str = ""
