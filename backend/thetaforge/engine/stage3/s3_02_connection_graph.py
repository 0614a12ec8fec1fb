"""S3.02 — Connection Graph.

Directed, forward-only edges owned by the source node:
  every node → its immediate successor            SPINE      strength 1.0
  "Structural Anchor" → next ≤2 later anchors     STRUCTURAL strength 0.9
"""

from __future__ import annotations

import logging

from thetaforge.engine.context import NodeConnection, PipelineContext
from thetaforge.engine.registry import Layer, transform
from thetaforge.engine.stage3.s3_01_helix_layout import ROLE_ANCHOR

logger = logging.getLogger(__name__)

EDGE_SPINE = "SPINE"
EDGE_STRUCTURAL = "STRUCTURAL"


@transform(
    id="S3.02",
    layer=Layer.GEOMETRY,
    dependencies=["S3.01"],
    description="Link nodes along the spine and between structural anchors",
)
def connection_graph(ctx: PipelineContext) -> None:
    config = ctx.config
    node_ids = list(ctx.nodes.keys())
    n = len(node_ids)

    for idx, node_id in enumerate(node_ids):
        node = ctx.nodes[node_id]
        if idx < n - 1:
            node.connections.append(
                NodeConnection(
                    target_id=node_ids[idx + 1],
                    strength=config.spine_strength,
                    type=EDGE_SPINE,
                )
            )
        if node.shape_role != ROLE_ANCHOR:
            continue

        found = 0
        for later_id in node_ids[idx + 1:]:
            if found >= config.max_structural_links:
                break
            if ctx.nodes[later_id].shape_role == ROLE_ANCHOR:
                node.connections.append(
                    NodeConnection(
                        target_id=later_id,
                        strength=config.structural_strength,
                        type=EDGE_STRUCTURAL,
                    )
                )
                found += 1

    edges = sum(len(node.connections) for node in ctx.nodes.values())
    logger.debug("Connection graph: %d nodes, %d edges", n, edges)
