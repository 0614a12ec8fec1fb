"""S3.03 — Resonance Propagation.

One ordered sweep over the nodes (no fixed-point iteration). Integrity changes
made earlier in the sweep are visible to later checks:
  source integrity > 85  → resonating, energy += 10, and for each edge
      target += source/100 × strength × 15 (clamped to [0, 100])
      target > 90        → resonating, energy += 5
system_resonance = min(100, mean(integrity) × 0.7 + energy / N × 2), 1 decimal.
"""

from __future__ import annotations

import logging

import numpy as np

from thetaforge.engine.context import PipelineContext
from thetaforge.engine.registry import Layer, transform
from thetaforge.utils.math_helpers import clamp, round_fixed

logger = logging.getLogger(__name__)

_INTEGRITY_MIN = 0.0
_INTEGRITY_MAX = 100.0


@transform(
    id="S3.03",
    layer=Layer.GEOMETRY,
    dependencies=["S3.02"],
    description="Propagate resonance along graph edges and score the system",
)
def resonance_propagation(ctx: PipelineContext) -> None:
    config = ctx.config
    nodes = ctx.nodes
    n = len(nodes)
    if n == 0:
        ctx.total_energy = 0.0
        ctx.system_resonance = 0.0
        return

    total_energy = 0.0
    for source in nodes.values():
        if source.theta_integrity <= config.resonance_threshold:
            continue
        source.is_resonating = True
        total_energy += config.source_energy

        for conn in source.connections:
            target = nodes.get(conn.target_id)
            if target is None:
                continue
            boost = (source.theta_integrity / 100) * conn.strength * config.boost_factor
            target.theta_integrity = clamp(
                target.theta_integrity + boost, _INTEGRITY_MIN, _INTEGRITY_MAX
            )
            if target.theta_integrity > config.cascade_threshold:
                target.is_resonating = True
                total_energy += config.cascade_energy

    avg_integrity = float(np.mean([node.theta_integrity for node in nodes.values()]))
    score = avg_integrity * config.integrity_weight + (total_energy / n) * config.energy_weight

    ctx.total_energy = total_energy
    ctx.system_resonance = round_fixed(min(100.0, score), 1)
    logger.debug(
        "Resonance: energy=%.0f avg_integrity=%.1f score=%.1f",
        total_energy,
        avg_integrity,
        ctx.system_resonance,
    )
