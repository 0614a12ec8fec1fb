"""PipelineContext — the single mutable state object flowing through all transforms.

Per-segment results → Segment / Stage2Data / SpatialNode records keyed by segment id
Cross-segment results → PipelineContext.* (system_resonance, quantum_nodes, etc.)
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from thetaforge.engine.combinations import COMBINATION_TABLE, CombinationEntry
from thetaforge.engine.config import PipelineConfig
from thetaforge.engine.rules import LOGIC_RULES, LogicRule
from thetaforge.engine.taxonomy import TAXONOMY


@dataclass(frozen=True)
class Label:
    """A detected (category, property) tag on a segment."""

    category: str
    property: str
    # Number found after the property text in the same segment, if any
    value: float | None = None


@dataclass(frozen=True)
class Segment:
    """One sentence-like piece of the input document."""

    id: str
    text: str
    labels: tuple[Label, ...] = ()

    @property
    def first_category(self) -> str:
        return self.labels[0].category if self.labels else "unknown"

    @property
    def first_property(self) -> str | None:
        return self.labels[0].property if self.labels else None


@dataclass(frozen=True)
class LogicOperation:
    type: str  # FUSION, DIFFUSION, THRESHOLD, CONSERVATION, EMERGENCE
    inputs: tuple[str, ...]
    output: str
    description: str
    rule: str
    universal_base: str  # SPACE, TIME, MASS_ENERGY, CHARGE_FIELD, ENTROPY
    noise_reduction: int


@dataclass(frozen=True)
class Stage2Data:
    segment_id: str
    base_properties: tuple[Label, ...]
    operations: tuple[LogicOperation, ...]

    def has_operation(self, op_type: str) -> bool:
        return any(op.type == op_type for op in self.operations)


@dataclass
class NodeConnection:
    target_id: str
    strength: float
    type: str  # SPINE or STRUCTURAL


@dataclass
class SpatialNode:
    """A segment's placement on the helix plus its mutable integrity score."""

    id: str
    theta_angle: int
    theta_integrity: float
    # Integer (x, y, z) coordinates
    spatial_pos: tuple[int, int, int]
    shape_role: str
    universal_alignment: tuple[str, ...] = ("Conservation", "Duality")
    connections: list[NodeConnection] = field(default_factory=list)
    is_resonating: bool = False


@dataclass
class CombinationNode:
    id: str
    source_a_id: str
    source_b_id: str
    gate_type: str  # AND, OR, XOR, NAND, CNOT
    hypothetical_output: str
    probability: float
    category_mix: str
    stability_description: str


@dataclass
class PipelineContext:
    """Shared state flowing through the entire pipeline."""

    # Raw input text
    document: str = ""

    # --- Static tables (injectable for tests with smaller fixtures) ---
    taxonomy: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(TAXONOMY))
    rules: tuple[LogicRule, ...] = LOGIC_RULES
    combinations: dict[str, CombinationEntry] = field(
        default_factory=lambda: dict(COMBINATION_TABLE)
    )
    config: PipelineConfig = field(default_factory=PipelineConfig)
    # Random source for the pairing fallback and entropy level
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    # --- Stage 1 ---
    # Raw pieces from sentence splitting, in document order
    pieces: list[str] = field(default_factory=list)
    segments: dict[str, Segment] = field(default_factory=dict)

    # --- Stage 2 ---
    logic: dict[str, Stage2Data] = field(default_factory=dict)

    # --- Stage 3 ---
    nodes: dict[str, SpatialNode] = field(default_factory=dict)
    complexity_ratio: float = 0.0
    total_energy: float = 0.0
    system_resonance: float = 0.0

    # --- Stage 4 ---
    quantum_nodes: list[CombinationNode] = field(default_factory=list)
    entropy_level: float = 0.0

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_segments(self) -> int:
        return len(self.segments)

    def get_segment(self, segment_id: str) -> Segment | None:
        return self.segments.get(segment_id)
