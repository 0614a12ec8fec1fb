"""Pipeline orchestrator — runs stage transforms in dependency order with adaptive gating."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from typing import Any

from thetaforge.engine.config import PipelineConfig
from thetaforge.engine.context import PipelineContext
from thetaforge.engine.registry import Layer, TransformRegistry, TransformSpec, load_transforms

logger = logging.getLogger(__name__)

# Graph transforms that have nothing to link when the document is empty
_GRAPH_TRANSFORMS = {"S3.02", "S3.03"}


class Pipeline:
    """Orchestrates the four-stage transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or load_transforms()
        # None keeps whatever config the context already carries
        self.config = config

    def run(self, ctx: PipelineContext, skip: set[str] | None = None) -> PipelineContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ordered = self._prepare(ctx, skip)

        logger.info("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            if spec.id in self._adaptive_gate(ctx):
                logger.debug("  %s skipped", spec.id)
                continue
            t0 = time.perf_counter()
            if self._run_one(spec, ctx):
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_streaming(
        self, ctx: PipelineContext, skip: set[str] | None = None
    ) -> Generator[dict[str, Any], None, None]:
        """Run the pipeline, yielding a progress dict before and after each transform.

        The caller's ``ctx`` is mutated in-place, so after the generator is
        exhausted the context contains all results (same as ``run()``).
        """
        ordered = self._prepare(ctx, skip)
        total = len(ordered)

        for i, spec in enumerate(ordered):
            event: dict[str, Any] = {
                "transform_id": spec.id,
                "description": spec.description,
                "layer": spec.layer.name,
                "index": i,
                "total": total,
                "elapsed_ms": 0.0,
                "status": "running",
                "error": "",
            }
            if spec.id in self._adaptive_gate(ctx):
                event["status"] = "skipped"
                yield event
                continue

            yield dict(event)

            t0 = time.perf_counter()
            ok = self._run_one(spec, ctx)
            event["elapsed_ms"] = round((time.perf_counter() - t0) * 1000, 1)
            event["status"] = "ok" if ok else "error"
            event["error"] = ctx.errors.get(spec.id, "")
            yield event

    def run_layer(self, ctx: PipelineContext, layer: Layer) -> PipelineContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(spec, ctx)
        return ctx

    def _prepare(self, ctx: PipelineContext, skip: set[str] | None) -> list[TransformSpec]:
        if self.config is not None:
            ctx.config = self.config
        return self.registry.plan(skip)

    def _run_one(self, spec: TransformSpec, ctx: PipelineContext) -> bool:
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return False
        ctx.completed_transforms.add(spec.id)
        return True

    def _adaptive_gate(self, ctx: PipelineContext) -> set[str]:
        """Determine which transforms to skip based on what has run so far.

        - Once segmentation has finished with zero segments, the connection
          graph and resonance sweep are skipped; their outputs stay empty.
        """
        skip: set[str] = set()
        if "S1.02" in ctx.completed_transforms and ctx.num_segments == 0:
            skip.update(_GRAPH_TRANSFORMS)
        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)
