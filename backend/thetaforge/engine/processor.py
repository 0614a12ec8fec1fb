"""Entry point — document text in, ProcessingResult out.

    result = process("The circle has a radius of 12 cm.", seed=7)
    result.stage2["shard_0"].operations[0].output  # "Diameter / Circumference"

Stages 1-3 are deterministic. Stage 4's fallback pairs and entropy level draw
from ``rng`` (or a generator seeded with ``seed``).
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from thetaforge.engine.combinations import COMBINATION_TABLE, CombinationEntry
from thetaforge.engine.config import PipelineConfig
from thetaforge.engine.context import PipelineContext
from thetaforge.engine.formatter import context_to_result
from thetaforge.engine.pipeline import Pipeline
from thetaforge.engine.rules import LOGIC_RULES, LogicRule
from thetaforge.engine.taxonomy import TAXONOMY
from thetaforge.models.result import ProcessingResult


def build_context(
    document: str,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    taxonomy: dict[str, Iterable[str]] | None = None,
    rules: Iterable[LogicRule] | None = None,
    combinations: dict[str, CombinationEntry] | None = None,
    config: PipelineConfig | None = None,
) -> PipelineContext:
    """Fresh context owning its own tables and random source."""
    source = taxonomy if taxonomy is not None else TAXONOMY
    return PipelineContext(
        document=document,
        taxonomy={category: tuple(props) for category, props in source.items()},
        rules=tuple(rules) if rules is not None else LOGIC_RULES,
        combinations=dict(combinations if combinations is not None else COMBINATION_TABLE),
        config=config or PipelineConfig(),
        rng=rng if rng is not None else np.random.default_rng(seed),
    )


def run_document(
    document: str,
    *,
    skip: set[str] | None = None,
    pipeline: Pipeline | None = None,
    **context_options,
) -> PipelineContext:
    """Run every stage and return the completed context (results plus metadata)."""
    ctx = build_context(document, **context_options)
    return (pipeline or Pipeline()).run(ctx, skip=skip)


def process(document: str, **options) -> ProcessingResult:
    """Run the four-stage pipeline over ``document``."""
    return context_to_result(run_document(document, **options))
