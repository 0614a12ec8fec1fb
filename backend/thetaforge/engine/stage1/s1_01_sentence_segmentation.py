"""S1.01 — Sentence Segmentation.

Split the document after every sentence terminator (. ! ?) that is followed
by whitespace. The whitespace is consumed; pieces that are empty or
whitespace-only are dropped. Piece text is otherwise kept verbatim.
"""

from __future__ import annotations

import logging
import re

from thetaforge.engine.context import PipelineContext
from thetaforge.engine.registry import Layer, transform

logger = logging.getLogger(__name__)

_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")


def split_sentences(document: str) -> list[str]:
    return [p for p in _SENTENCE_BOUNDARY_RE.split(document) if p.strip()]


@transform(
    id="S1.01",
    layer=Layer.SEGMENTATION,
    description="Split the document into sentence-like pieces",
)
def sentence_segmentation(ctx: PipelineContext) -> None:
    ctx.pieces = split_sentences(ctx.document)
    logger.debug("Split document into %d pieces", len(ctx.pieces))
