"""PipelineContext → ProcessingResult model, summary numbers and a plain-text report."""

from __future__ import annotations

from collections import Counter

from thetaforge.engine.context import (
    CombinationNode,
    Label,
    LogicOperation,
    PipelineContext,
    SpatialNode,
)
from thetaforge.models.result import (
    CombinationNodeModel,
    LabelModel,
    LogicOperationModel,
    NodeConnectionModel,
    ProcessingResult,
    ProcessingSummary,
    SegmentModel,
    SpatialNodeModel,
    Stage2Model,
    Stage3Output,
    Stage4Output,
    Vector3,
)

# Each laid-out node adds 8.5 points of display "noise reduction", capped at 100
_NOISE_REDUCTION_PER_NODE = 8.5
_NOISE_REDUCTION_MAX = 100.0


def _label(label: Label) -> LabelModel:
    return LabelModel(category=label.category, property=label.property, value=label.value)


def _operation(op: LogicOperation) -> LogicOperationModel:
    return LogicOperationModel(
        type=op.type,
        inputs=list(op.inputs),
        output=op.output,
        description=op.description,
        rule=op.rule,
        universal_base=op.universal_base,
        noise_reduction=op.noise_reduction,
    )


def _node(node: SpatialNode) -> SpatialNodeModel:
    x, y, z = node.spatial_pos
    return SpatialNodeModel(
        id=node.id,
        theta_angle=node.theta_angle,
        theta_integrity=node.theta_integrity,
        spatial_pos=Vector3(x=x, y=y, z=z),
        shape_role=node.shape_role,
        universal_alignment=list(node.universal_alignment),
        connections=[
            NodeConnectionModel(target_id=c.target_id, strength=c.strength, type=c.type)
            for c in node.connections
        ],
        is_resonating=node.is_resonating,
    )


def _combination(node: CombinationNode) -> CombinationNodeModel:
    return CombinationNodeModel(
        id=node.id,
        source_a_id=node.source_a_id,
        source_b_id=node.source_b_id,
        gate_type=node.gate_type,
        hypothetical_output=node.hypothetical_output,
        probability=node.probability,
        category_mix=node.category_mix,
        stability_description=node.stability_description,
    )


def context_to_result(ctx: PipelineContext) -> ProcessingResult:
    """Build the ProcessingResult model from a completed context."""
    return ProcessingResult(
        stage1={
            sid: SegmentModel(id=seg.id, text=seg.text, labels=[_label(lb) for lb in seg.labels])
            for sid, seg in ctx.segments.items()
        },
        stage2={
            sid: Stage2Model(
                segment_id=data.segment_id,
                operations=[_operation(op) for op in data.operations],
                base_properties=[_label(lb) for lb in data.base_properties],
            )
            for sid, data in ctx.logic.items()
        },
        stage3=Stage3Output(
            nodes={nid: _node(node) for nid, node in ctx.nodes.items()},
            system_resonance=ctx.system_resonance,
        ),
        stage4=Stage4Output(
            quantum_nodes=[_combination(q) for q in ctx.quantum_nodes],
            entropy_level=ctx.entropy_level,
        ),
    )


def context_to_summary(ctx: PipelineContext) -> ProcessingSummary:
    op_counts = Counter(op.type for data in ctx.logic.values() for op in data.operations)
    role_counts = Counter(node.shape_role for node in ctx.nodes.values())
    return ProcessingSummary(
        segment_count=ctx.num_segments,
        labelled_segment_count=sum(1 for s in ctx.segments.values() if s.labels),
        operation_counts=dict(op_counts),
        role_counts=dict(role_counts),
        resonating_nodes=sum(1 for node in ctx.nodes.values() if node.is_resonating),
        system_resonance=ctx.system_resonance,
        geometric_noise_reduction=min(
            _NOISE_REDUCTION_MAX, len(ctx.nodes) * _NOISE_REDUCTION_PER_NODE
        ),
        combination_count=len(ctx.quantum_nodes),
        entropy_level=round(ctx.entropy_level, 1),
    )


def context_to_report_text(ctx: PipelineContext) -> str:
    """Render a compact per-stage report of a completed context."""
    lines: list[str] = ["=== THETAFORGE REPORT ==="]

    lines.append(f"\n[STAGE 1] {ctx.num_segments} segments")
    for seg in ctx.segments.values():
        tags = ", ".join(
            f"{lb.category}:{lb.property}" + (f"={lb.value:g}" if lb.value is not None else "")
            for lb in seg.labels
        )
        lines.append(f"  {seg.id}: {tags or '(no properties)'}")

    lines.append("\n[STAGE 2] logic operations")
    for data in ctx.logic.values():
        if not data.operations:
            lines.append(f"  {data.segment_id}: none")
            continue
        for op in data.operations:
            lines.append(
                f"  {data.segment_id}: {op.type} {' + '.join(op.inputs)} → {op.output}"
                f" [{op.universal_base}, {op.rule}]"
            )

    lines.append(f"\n[STAGE 3] system resonance {ctx.system_resonance:.1f}")
    for node in ctx.nodes.values():
        x, y, z = node.spatial_pos
        marker = " *" if node.is_resonating else ""
        lines.append(
            f"  {node.id}: {node.shape_role} θ={node.theta_angle}° "
            f"pos=({x}, {y}, {z}) integrity={node.theta_integrity:.1f}"
            f" links={len(node.connections)}{marker}"
        )

    lines.append(
        f"\n[STAGE 4] {len(ctx.quantum_nodes)} combinations, entropy {ctx.entropy_level:.1f}"
    )
    for q in ctx.quantum_nodes:
        lines.append(
            f"  {q.id}: {q.gate_type} {q.category_mix} → {q.hypothetical_output}"
            f" (p={q.probability:.2f})"
        )

    if ctx.errors:
        lines.append("\n[ERRORS]")
        for tid, msg in sorted(ctx.errors.items()):
            lines.append(f"  {tid}: {msg}")

    return "\n".join(lines)
