"""S4.01 — Superposition Pairing.

Every unordered pair (i < j) of segments, in document order, whose first-label
categories differ is looked up in the combination table by sorted category key:
  table hit    → literal gate / output / probability / description
  table miss   → skip with probability 0.3, else generic XOR with a random
                 probability built from the two first property names
Emission stops at the combination cap; no random draws happen after that.
An informational entropy level in [0, 100) is drawn last.
"""

from __future__ import annotations

import logging

import numpy as np

from thetaforge.engine.combinations import (
    FALLBACK_DESCRIPTION_TEMPLATE,
    FALLBACK_GATE,
    FALLBACK_OUTPUT_TEMPLATE,
    CombinationEntry,
    combination_key,
)
from thetaforge.engine.context import CombinationNode, PipelineContext, Segment
from thetaforge.engine.registry import Layer, transform

logger = logging.getLogger(__name__)

_UNKNOWN_PROPERTY = "unknown"


def _fallback_entry(
    seg_a: Segment, seg_b: Segment, rng: np.random.Generator, skip_probability: float
) -> CombinationEntry | None:
    if rng.random() < skip_probability:
        return None
    prop_a = seg_a.first_property or _UNKNOWN_PROPERTY
    prop_b = seg_b.first_property or _UNKNOWN_PROPERTY
    return CombinationEntry(
        gate=FALLBACK_GATE,
        output=FALLBACK_OUTPUT_TEMPLATE.format(prop_a=prop_a),
        probability=float(rng.random()),
        description=FALLBACK_DESCRIPTION_TEMPLATE.format(prop_a=prop_a, prop_b=prop_b),
    )


@transform(
    id="S4.01",
    layer=Layer.SUPERPOSITION,
    dependencies=["S2.01", "S3.01"],
    description="Pair cross-category segments through the combination table",
)
def superposition_pairing(ctx: PipelineContext) -> None:
    config = ctx.config
    # Node order from the layout stage, which mirrors segment order
    keys = [k for k in (ctx.nodes or ctx.logic) if k in ctx.segments]
    quantum_nodes: list[CombinationNode] = []

    for i in range(len(keys)):
        for j in range(i + 1, len(keys)):
            seg_a = ctx.segments[keys[i]]
            seg_b = ctx.segments[keys[j]]
            cat_a = seg_a.first_category
            cat_b = seg_b.first_category
            if cat_a == cat_b or len(quantum_nodes) >= config.max_combinations:
                continue

            entry = ctx.combinations.get(combination_key(cat_a, cat_b))
            if entry is None:
                entry = _fallback_entry(seg_a, seg_b, ctx.rng, config.fallback_skip_probability)
            if entry is None:
                continue

            quantum_nodes.append(
                CombinationNode(
                    id=f"quantum_{i}_{j}",
                    source_a_id=seg_a.id,
                    source_b_id=seg_b.id,
                    gate_type=entry.gate,
                    hypothetical_output=entry.output,
                    probability=entry.probability,
                    category_mix=f"{cat_a.upper()} + {cat_b.upper()}",
                    stability_description=entry.description,
                )
            )

    ctx.quantum_nodes = quantum_nodes
    ctx.entropy_level = float(ctx.rng.random() * 100)
    logger.debug("Superposition: %d combination nodes", len(quantum_nodes))
