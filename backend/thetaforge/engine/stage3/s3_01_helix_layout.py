"""S3.01 — Helix Layout.

Global shape from the whole document:
  complexity_ratio = segments with a FUSION or THRESHOLD op / N
  density          = min(N, 40)
  rotations        = 2.5 + complexity_ratio × 3.5 + density / 8
  total_height     = 600 + density × 45

Per segment i (t = i / max(N-1, 1), θ = t × 2π × rotations), role by priority:
  FUSION     → "Structural Anchor"  r=320 integrity=95
  THRESHOLD  → "Critical Junction"  r=260 integrity=88
  DIFFUSION  → "Diffraction Point"  r=120 integrity=80
  otherwise  → "Data Vertex"        r=180 + 20·sin(8πt) integrity=75
then r += 40·cos(2θ), x = r·cos θ, z = r·sin θ, y = t·H − H/2.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from thetaforge.engine.config import PipelineConfig
from thetaforge.engine.context import PipelineContext, SpatialNode, Stage2Data
from thetaforge.engine.registry import Layer, transform
from thetaforge.engine.rules import DIFFUSION, FUSION, THRESHOLD
from thetaforge.utils.math_helpers import round_fixed, round_half_up

logger = logging.getLogger(__name__)

ROLE_ANCHOR = "Structural Anchor"
ROLE_JUNCTION = "Critical Junction"
ROLE_DIFFRACTION = "Diffraction Point"
ROLE_VERTEX = "Data Vertex"


def compute_complexity_ratio(logic: dict[str, Stage2Data]) -> float:
    if not logic:
        return 0.0
    complex_ops = sum(
        1 for d in logic.values() if d.has_operation(FUSION) or d.has_operation(THRESHOLD)
    )
    return complex_ops / len(logic)


def _role_for(data: Stage2Data, t: float, config: PipelineConfig) -> tuple[str, float, float]:
    """Return (role, base_radius, starting_integrity)."""
    if data.has_operation(FUSION):
        return ROLE_ANCHOR, config.anchor_radius, config.anchor_integrity
    if data.has_operation(THRESHOLD):
        return ROLE_JUNCTION, config.junction_radius, config.junction_integrity
    if data.has_operation(DIFFUSION):
        return ROLE_DIFFRACTION, config.diffraction_radius, config.diffraction_integrity
    radius = config.vertex_radius + math.sin(t * math.pi * 8) * config.vertex_wave_amplitude
    return ROLE_VERTEX, radius, config.vertex_integrity


@transform(
    id="S3.01",
    layer=Layer.GEOMETRY,
    dependencies=["S2.01"],
    description="Place segments on a complexity-shaped 3D helix",
)
def helix_layout(ctx: PipelineContext) -> None:
    config = ctx.config
    keys = list(ctx.logic.keys())
    n = len(keys)

    ctx.complexity_ratio = compute_complexity_ratio(ctx.logic)
    density = min(n, config.density_cap)
    rotations = (
        config.base_rotations
        + ctx.complexity_ratio * config.complexity_rotation_weight
        + density / config.density_rotation_divisor
    )
    total_height = config.base_height + density * config.height_per_segment
    total_angle = math.pi * 2 * rotations

    ts = np.arange(n, dtype=np.float64) / max(n - 1, 1)
    thetas = ts * total_angle

    nodes: dict[str, SpatialNode] = {}
    for key, t, theta in zip(keys, ts.tolist(), thetas.tolist()):
        role, base_radius, integrity = _role_for(ctx.logic[key], t, config)
        radius = base_radius + math.cos(theta * 2) * config.helix_variance

        x = math.cos(theta) * radius
        z = math.sin(theta) * radius
        y = t * total_height - total_height / 2

        nodes[key] = SpatialNode(
            id=key,
            theta_angle=round_half_up(math.degrees(theta)) % 360,
            theta_integrity=integrity,
            spatial_pos=(int(round_fixed(x)), int(round_fixed(y)), int(round_fixed(z))),
            shape_role=role,
        )

    ctx.nodes = nodes
    logger.debug(
        "Helix: %d nodes, %.2f rotations, height %.0f", n, rotations, total_height
    )
