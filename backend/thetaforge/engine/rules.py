"""Logic rule table for Stage 2.

Each rule tests for the presence of one or two property names on a segment
and, when it fires, contributes one logic operation with fixed content.
Evaluation order is the tuple order below; every rule is evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass

FUSION = "FUSION"
DIFFUSION = "DIFFUSION"
THRESHOLD = "THRESHOLD"
CONSERVATION = "CONSERVATION"
EMERGENCE = "EMERGENCE"

OPERATION_TYPES = (FUSION, DIFFUSION, THRESHOLD, CONSERVATION, EMERGENCE)
UNIVERSAL_BASES = ("SPACE", "TIME", "MASS_ENERGY", "CHARGE_FIELD", "ENTROPY")


@dataclass(frozen=True)
class LogicRule:
    name: str
    # Lower-case property names the rule looks for
    trigger: tuple[str, ...]
    # True: every trigger property must be present. False: any one is enough.
    require_all: bool
    op_type: str
    inputs: tuple[str, ...]
    output: str
    description: str
    universal_base: str
    noise_reduction: int

    def matches(self, properties: set[str]) -> bool:
        if self.require_all:
            return all(p in properties for p in self.trigger)
        return any(p in properties for p in self.trigger)


LOGIC_RULES: tuple[LogicRule, ...] = (
    # ── Information / entropy ──
    LogicRule(
        name="Temporal Logic",
        trigger=("creation date", "modification date"),
        require_all=False,
        op_type=THRESHOLD,
        inputs=("Creation", "Mod Date"),
        output="Causality Verified",
        description="Creation < Modification",
        universal_base="TIME",
        noise_reduction=95,
    ),
    LogicRule(
        name="Conservation of Info",
        # "compression" is matched as a whole property name, not a prefix
        trigger=("size on disk", "compression"),
        require_all=False,
        op_type=CONSERVATION,
        inputs=("Size", "Compression"),
        output="Shannon Entropy",
        description="Size * Ratio = Information",
        universal_base="ENTROPY",
        noise_reduction=88,
    ),
    # ── Space ──
    LogicRule(
        name="Geometric Chain",
        trigger=("radius",),
        require_all=False,
        op_type=DIFFUSION,
        inputs=("Radius",),
        output="Diameter / Circumference",
        description="r → 2r → 2πr",
        universal_base="SPACE",
        noise_reduction=100,
    ),
    LogicRule(
        name="Dimensional Emergence",
        trigger=("length", "width"),
        require_all=True,
        op_type=FUSION,
        inputs=("Length", "Width"),
        output="Area (2D Space)",
        description="Euclidean Product",
        universal_base="SPACE",
        noise_reduction=92,
    ),
    # ── Mass-energy ──
    LogicRule(
        name="Material Definition",
        trigger=("mass", "volume"),
        require_all=True,
        op_type=FUSION,
        inputs=("Mass", "Volume"),
        output="Density",
        description="Mass / Volume",
        universal_base="MASS_ENERGY",
        noise_reduction=90,
    ),
    LogicRule(
        name="Phase Transition",
        trigger=("temperature", "melting point"),
        require_all=False,
        op_type=THRESHOLD,
        inputs=("Temp", "Melting Pt"),
        output="Phase State",
        description="T > Melting → Liquid",
        universal_base="MASS_ENERGY",
        noise_reduction=85,
    ),
    # ── Time / waves ──
    LogicRule(
        name="Temporal Integration",
        trigger=("frame rate", "duration"),
        require_all=False,
        op_type=CONSERVATION,
        inputs=("FPS", "Duration"),
        output="Total Frame Count",
        description="Rate * Time = Quantity",
        universal_base="TIME",
        noise_reduction=98,
    ),
    LogicRule(
        name="Wave-Particle Duality",
        trigger=("frequency", "wavelength"),
        require_all=False,
        op_type=EMERGENCE,
        inputs=("Frequency",),
        output="Wave Energy",
        description="E = hf",
        universal_base="CHARGE_FIELD",
        noise_reduction=80,
    ),
)

# Fallback operation for labelled segments that no rule matched
FALLBACK_RULE_NAME = "Universal Connection"
FALLBACK_OUTPUT = "Universal Projection"
FALLBACK_DESCRIPTION = "Mapping to Core Observable"
FALLBACK_NOISE_REDUCTION = 60
FALLBACK_BASE = "ENTROPY"

CATEGORY_BASE: dict[str, str] = {
    "physics": "MASS_ENERGY",
    "material": "MASS_ENERGY",
    "biological": "MASS_ENERGY",
    "geometry": "SPACE",
    "numerical": "SPACE",
    "video": "TIME",
    "audio": "TIME",
}
