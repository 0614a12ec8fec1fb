"""Stage step registry.

Each step of the four stages is a plain ``fn(ctx) -> None`` declared with
``@transform``. The decorator records the step id, its stage and the ids it
reads from; the registry turns that into a run plan:

    @transform(id="S3.02", layer=Layer.GEOMETRY, dependencies=["S3.01"])
    def connection_graph(ctx: PipelineContext) -> None:
        ...

``plan(skip)`` drops the skipped steps together with every step that needs one
of them, so a plan never runs a step whose inputs were not produced.
"""

from __future__ import annotations

import enum
import heapq
import importlib
import logging
import pkgutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from thetaforge.engine.context import PipelineContext

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ("stage1", "stage2", "stage3", "stage4")


class Layer(enum.IntEnum):
    SEGMENTATION = 1
    LOGIC = 2
    GEOMETRY = 3
    SUPERPOSITION = 4


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["PipelineContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Stage steps keyed by id, with dependency-aware run planning."""

    def __init__(self) -> None:
        self._steps: dict[str, TransformSpec] = {}

    @property
    def count(self) -> int:
        return len(self._steps)

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._steps:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._steps[spec.id] = spec
        logger.debug("Registered %s in stage %s", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._steps[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted((s for s in self._steps.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[TransformSpec]:
        return sorted(self._steps.values(), key=lambda s: (s.layer, s.id))

    def requirements(self, ids: Iterable[str]) -> set[str]:
        """``ids`` plus everything they depend on, transitively."""
        needed: set[str] = set()
        pending = list(ids)
        while pending:
            tid = pending.pop()
            if tid in needed:
                continue
            needed.add(tid)
            if tid in self._steps:
                pending.extend(self._steps[tid].dependencies)
        return needed

    def dependents(self, ids: Iterable[str]) -> set[str]:
        """``ids`` plus every step that needs one of them, transitively."""
        affected = set(ids)
        grew = True
        while grew:
            grew = False
            for spec in self._steps.values():
                if spec.id not in affected and affected.intersection(spec.dependencies):
                    affected.add(spec.id)
                    grew = True
        return affected

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Dependency order over ``requested_ids`` and their requirements (all steps if None).

        Steps that become ready together run in id order.
        """
        wanted = self._steps.keys() if requested_ids is None else self.requirements(requested_ids)
        pool = {tid: self._steps[tid] for tid in wanted if tid in self._steps}

        blockers = {
            tid: {dep for dep in spec.dependencies if dep in pool} for tid, spec in pool.items()
        }
        ready = [tid for tid, deps in blockers.items() if not deps]
        heapq.heapify(ready)

        ordered: list[TransformSpec] = []
        while ready:
            tid = heapq.heappop(ready)
            ordered.append(pool[tid])
            for other_id, deps in blockers.items():
                if tid in deps:
                    deps.discard(tid)
                    if not deps:
                        heapq.heappush(ready, other_id)

        if len(ordered) != len(pool):
            stuck = sorted(set(pool) - {s.id for s in ordered})
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    def plan(self, skip: Iterable[str] | None = None) -> list[TransformSpec]:
        """Run order for every step except ``skip`` and the steps that need a skipped one."""
        skip = set(skip or ())
        unknown = skip - self._steps.keys()
        if unknown:
            raise ValueError(f"Unknown transform id(s) in skip: {sorted(unknown)}")

        dropped = self.dependents(skip)
        if dropped - skip:
            logger.info("Skipping %s also drops %s", sorted(skip), sorted(dropped - skip))
        return self.resolve_order(set(self._steps) - dropped)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def load_transforms() -> TransformRegistry:
    """Import every stage module so @transform decorators fire.

    Safe to call repeatedly: already-imported modules are not re-executed.
    """
    for stage_name in _STAGE_PACKAGES:
        package = importlib.import_module(f"thetaforge.engine.{stage_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"thetaforge.engine.{stage_name}.{module_name}")
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as stage step ``id``."""

    def decorator(fn: Callable[["PipelineContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or ()),
                description=description,
            )
        )
        return fn

    return decorator
