"""Simulated image analysis — stands in for a vision model call.

No image understanding happens here: after an artificial delay the same
simulation-mode description is returned for any input, ready for ``process()``.
"""

from __future__ import annotations

import asyncio
import logging

from thetaforge.config import settings

logger = logging.getLogger(__name__)

SIMULATED_DESCRIPTION = """[SIMULATION MODE]
Observed Object: Visual Data Artifact.
Dimensions: Variable Resolution (Detected).
Color Space: RGB Spectrum / Light Intensity Map.
Material Composition: Digital Information Lattice.
Geometry: Complex Euclidean forms detected in 2D projection.
Estimated Entropy: 8.4 bits/pixel (High Complexity).
Energy Signature: Static potential awaiting kinetic processing.
Structure: Hierarchy of visual elements detected, ready for logical atomization.
Note: Real-time image analysis is disabled in this public demo version.
"""


async def analyze_image(data: bytes, mime_type: str, delay_s: float | None = None) -> str:
    """Return a plain-text description of the image (simulation mode)."""
    delay = settings.simulated_analysis_delay_s if delay_s is None else delay_s
    logger.info("Simulated analysis of %d-byte %s image (%.1fs delay)", len(data), mime_type, delay)
    if delay > 0:
        await asyncio.sleep(delay)
    return SIMULATED_DESCRIPTION
