"""Cross-category combination table for Stage 4.

Keys are the two category names sorted and joined with "|".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CombinationEntry:
    gate: str  # AND, OR, XOR, NAND, CNOT
    output: str
    probability: float
    description: str


def combination_key(cat_a: str, cat_b: str) -> str:
    return "|".join(sorted((cat_a, cat_b)))


COMBINATION_TABLE: dict[str, CombinationEntry] = {
    combination_key("biological", "software"): CombinationEntry(
        gate="XOR",
        output="Bio-Digital Entropy",
        probability=0.95,
        description="Reducing genetic mutation and code compilation to pure Information Entropy.",
    ),
    combination_key("physics", "software"): CombinationEntry(
        gate="AND",
        output="Simulation Energy",
        probability=0.88,
        description="Calculating the Energy cost of enforcing conservation laws in a digital system.",
    ),
    combination_key("audio", "geometry"): CombinationEntry(
        gate="CNOT",
        output="Acoustic Force",
        probability=0.75,
        description="Sound waves exerting Force on geometric structures (Cymatics) in Space.",
    ),
    combination_key("material", "computer_file"): CombinationEntry(
        gate="NAND",
        output="Matter Information",
        probability=0.65,
        description="Encoding Information bits into the Mass states of physical matter.",
    ),
    combination_key("environmental", "text"): CombinationEntry(
        gate="OR",
        output="System Entropy",
        probability=0.45,
        description="Reading environmental chaos as high Entropy data streams.",
    ),
    combination_key("video", "physics"): CombinationEntry(
        gate="AND",
        output="Light Energy",
        probability=0.81,
        description="Frame rate synchronized with photon Energy distribution over Time.",
    ),
}

# Unmatched pairs: a generic XOR combination built from the first properties
FALLBACK_GATE = "XOR"
FALLBACK_OUTPUT_TEMPLATE = "Vector-{prop_a}"
FALLBACK_DESCRIPTION_TEMPLATE = (
    "Reducing {prop_a} and {prop_b} to fundamental Force vectors in Space-Time."
)
