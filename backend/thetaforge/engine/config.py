"""Pipeline configuration — numeric constants for the geometry and pairing stages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls helix shape, resonance propagation and cross-category pairing."""

    # Helix shape: rotations = base + complexity × weight + density / divisor
    base_rotations: float = 2.5
    complexity_rotation_weight: float = 3.5
    density_rotation_divisor: float = 8.0
    # Segment count beyond which the helix stops growing
    density_cap: int = 40
    base_height: float = 600.0
    height_per_segment: float = 45.0

    # Role radii (helix distance from the vertical axis) and starting integrity
    anchor_radius: float = 320.0
    anchor_integrity: float = 95.0
    junction_radius: float = 260.0
    junction_integrity: float = 88.0
    diffraction_radius: float = 120.0
    diffraction_integrity: float = 80.0
    vertex_radius: float = 180.0
    vertex_wave_amplitude: float = 20.0
    vertex_integrity: float = 75.0
    # cos(2θ) wobble added to every radius
    helix_variance: float = 40.0

    # Connection graph
    spine_strength: float = 1.0
    structural_strength: float = 0.9
    max_structural_links: int = 2

    # Resonance propagation
    resonance_threshold: float = 85.0
    cascade_threshold: float = 90.0
    boost_factor: float = 15.0
    source_energy: float = 10.0
    cascade_energy: float = 5.0
    integrity_weight: float = 0.7
    energy_weight: float = 2.0

    # Cross-category pairing
    max_combinations: int = 24
    fallback_skip_probability: float = 0.3
