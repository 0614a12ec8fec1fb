"""S1.02 — Property Tagging.

Scan every (category, property) pair of the taxonomy against each piece:
  IF property occurs in the piece (case-insensitive)  → record a Label
  IF a number appears after it in the same piece      → Label.value = that number

A property listed under several categories yields one label per category.
Pieces without any match still become segments (with no labels).
"""

from __future__ import annotations

import functools
import logging
import re

from thetaforge.engine.context import Label, PipelineContext, Segment
from thetaforge.engine.registry import Layer, transform

logger = logging.getLogger(__name__)

SEGMENT_ID_PREFIX = "shard_"


@functools.lru_cache(maxsize=512)
def _value_pattern(prop: str) -> re.Pattern[str]:
    # Lazy gap: the first number anywhere after the property text
    return re.compile(re.escape(prop) + r".*?([0-9]+(?:\.[0-9]+)?)", re.IGNORECASE)


def extract_value(piece: str, prop: str) -> float | None:
    match = _value_pattern(prop).search(piece)
    if match is None:
        return None
    return float(match.group(1))


def tag_piece(piece: str, taxonomy: dict[str, tuple[str, ...]]) -> tuple[Label, ...]:
    lower_piece = piece.lower()
    labels: list[Label] = []
    for category, props in taxonomy.items():
        for prop in props:
            if prop.lower() in lower_piece:
                labels.append(Label(category=category, property=prop, value=extract_value(piece, prop)))
    return tuple(labels)


@transform(
    id="S1.02",
    layer=Layer.SEGMENTATION,
    dependencies=["S1.01"],
    description="Tag each piece with taxonomy properties and trailing values",
)
def property_tagging(ctx: PipelineContext) -> None:
    segments: dict[str, Segment] = {}
    for index, piece in enumerate(ctx.pieces):
        segment_id = f"{SEGMENT_ID_PREFIX}{index}"
        segments[segment_id] = Segment(
            id=segment_id,
            text=piece,
            labels=tag_piece(piece, ctx.taxonomy),
        )
    ctx.segments = segments

    labelled = sum(1 for s in segments.values() if s.labels)
    logger.debug("Tagged %d segments (%d labelled)", len(segments), labelled)
