"""POST /api/analyze-image — simulated image description fed into the pipeline."""

from __future__ import annotations

import base64
import binascii
import logging

from fastapi import APIRouter, Depends, HTTPException

from thetaforge.api.process import run_text
from thetaforge.config import Settings
from thetaforge.dependencies import get_settings
from thetaforge.llm.client import analyze_image
from thetaforge.models.requests import ImageAnalysisRequest
from thetaforge.models.responses import ImageAnalysisResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _decode_image(payload: str) -> bytes:
    # Accept "data:image/png;base64,...." as produced by browser file readers
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid base64 image data: {e}") from e


@router.post("/analyze-image", response_model=ImageAnalysisResponse)
async def analyze_image_endpoint(
    req: ImageAnalysisRequest,
    cfg: Settings = Depends(get_settings),
) -> ImageAnalysisResponse:
    data = _decode_image(req.image_base64)
    if not data:
        raise HTTPException(status_code=400, detail="Empty image payload")

    description = await analyze_image(data, req.mime_type, delay_s=cfg.simulated_analysis_delay_s)
    processed = run_text(description, req.seed)
    return ImageAnalysisResponse(description=description, **dict(processed))
