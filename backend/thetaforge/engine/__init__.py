"""ThetaForge four-stage document transform engine."""

from thetaforge.engine.registry import transform, Layer, get_registry, load_transforms
from thetaforge.engine.context import PipelineContext
from thetaforge.engine.pipeline import Pipeline
from thetaforge.engine.processor import process, run_document

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "PipelineContext",
    "Pipeline",
    "process",
    "run_document",
]
