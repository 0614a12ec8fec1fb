"""Core result data model — the structured output of the four-stage pipeline.

Field aliases carry the wire names consumers expect (``universalBase``,
``targetId``, ``sourceA_id`` ...); models dump by alias.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(validate_by_name=True, serialize_by_alias=True)


# ── Stage 1 ──


class LabelModel(_WireModel):
    category: str
    property: str
    value: float | None = None


class SegmentModel(_WireModel):
    id: str
    text: str
    labels: list[LabelModel] = Field(default_factory=list)


# ── Stage 2 ──


class LogicOperationModel(_WireModel):
    type: str
    inputs: list[str] = Field(default_factory=list)
    output: str
    description: str = ""
    rule: str = ""
    universal_base: str = Field(alias="universalBase")
    noise_reduction: int = Field(alias="noiseReduction", ge=0, le=100)


class Stage2Model(_WireModel):
    segment_id: str = Field(alias="segmentId")
    operations: list[LogicOperationModel] = Field(default_factory=list)
    base_properties: list[LabelModel] = Field(default_factory=list, alias="baseProperties")


# ── Stage 3 ──


class Vector3(_WireModel):
    x: int = 0
    y: int = 0
    z: int = 0


class NodeConnectionModel(_WireModel):
    target_id: str = Field(alias="targetId")
    strength: float = Field(ge=0.0, le=1.0)
    type: str


class SpatialNodeModel(_WireModel):
    id: str
    theta_angle: int = Field(ge=0, lt=360)
    theta_integrity: float = Field(ge=0.0, le=100.0)
    spatial_pos: Vector3
    shape_role: str
    universal_alignment: list[str] = Field(default_factory=list)
    connections: list[NodeConnectionModel] = Field(default_factory=list)
    is_resonating: bool = False


class Stage3Output(_WireModel):
    nodes: dict[str, SpatialNodeModel] = Field(default_factory=dict)
    system_resonance: float = Field(default=0.0, ge=0.0, le=100.0)


# ── Stage 4 ──


class CombinationNodeModel(_WireModel):
    id: str
    source_a_id: str = Field(alias="sourceA_id")
    source_b_id: str = Field(alias="sourceB_id")
    gate_type: str = Field(alias="gateType")
    hypothetical_output: str
    probability: float = Field(ge=0.0, le=1.0)
    category_mix: str
    stability_description: str = ""


class Stage4Output(_WireModel):
    quantum_nodes: list[CombinationNodeModel] = Field(default_factory=list)
    entropy_level: float = 0.0


class ProcessingResult(_WireModel):
    """Complete output of one ``process()`` call."""

    stage1: dict[str, SegmentModel] = Field(default_factory=dict)
    stage2: dict[str, Stage2Model] = Field(default_factory=dict)
    stage3: Stage3Output = Field(default_factory=Stage3Output)
    stage4: Stage4Output = Field(default_factory=Stage4Output)


class ProcessingSummary(BaseModel):
    """Headline numbers for a processed document."""

    segment_count: int = 0
    labelled_segment_count: int = 0
    operation_counts: dict[str, int] = Field(default_factory=dict)
    role_counts: dict[str, int] = Field(default_factory=dict)
    resonating_nodes: int = 0
    system_resonance: float = 0.0
    # Display metric: min(100, node_count × 8.5)
    geometric_noise_reduction: float = 0.0
    combination_count: int = 0
    entropy_level: float = 0.0
