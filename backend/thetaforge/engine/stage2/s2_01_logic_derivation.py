"""S2.01 — Logic Derivation.

Each segment is evaluated on its own against the ordered rule table:
  every rule whose trigger properties are present   → one LogicOperation
  no rule fired AND the segment has labels         → one fallback DIFFUSION
  no labels                                         → no operations

The fallback's universal base comes from the first label's category.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from thetaforge.engine.context import LogicOperation, PipelineContext, Segment, Stage2Data
from thetaforge.engine.registry import Layer, transform
from thetaforge.engine.rules import (
    CATEGORY_BASE,
    DIFFUSION,
    FALLBACK_BASE,
    FALLBACK_DESCRIPTION,
    FALLBACK_NOISE_REDUCTION,
    FALLBACK_OUTPUT,
    FALLBACK_RULE_NAME,
    LogicRule,
)

logger = logging.getLogger(__name__)


def _operation_from_rule(rule: LogicRule) -> LogicOperation:
    return LogicOperation(
        type=rule.op_type,
        inputs=rule.inputs,
        output=rule.output,
        description=rule.description,
        rule=rule.name,
        universal_base=rule.universal_base,
        noise_reduction=rule.noise_reduction,
    )


def _fallback_operation(segment: Segment) -> LogicOperation:
    first = segment.labels[0]
    return LogicOperation(
        type=DIFFUSION,
        inputs=(first.property,),
        output=FALLBACK_OUTPUT,
        description=FALLBACK_DESCRIPTION,
        rule=FALLBACK_RULE_NAME,
        universal_base=CATEGORY_BASE.get(first.category, FALLBACK_BASE),
        noise_reduction=FALLBACK_NOISE_REDUCTION,
    )


def derive_operations(segment: Segment, rules: Iterable[LogicRule]) -> tuple[LogicOperation, ...]:
    properties = {label.property.lower() for label in segment.labels}
    operations = [_operation_from_rule(rule) for rule in rules if rule.matches(properties)]
    if not operations and segment.labels:
        operations.append(_fallback_operation(segment))
    return tuple(operations)


@transform(
    id="S2.01",
    layer=Layer.LOGIC,
    dependencies=["S1.02"],
    description="Derive logic operations from tagged properties",
)
def logic_derivation(ctx: PipelineContext) -> None:
    logic: dict[str, Stage2Data] = {}
    for segment_id, segment in ctx.segments.items():
        logic[segment_id] = Stage2Data(
            segment_id=segment_id,
            base_properties=segment.labels,
            operations=derive_operations(segment, ctx.rules),
        )
    ctx.logic = logic

    total_ops = sum(len(d.operations) for d in logic.values())
    logger.debug("Derived %d operations across %d segments", total_ops, len(logic))
