"""Tests for Stage 3 — helix layout, connection graph and resonance propagation."""

import pytest

from thetaforge.engine.context import PipelineContext
from thetaforge.engine.pipeline import Pipeline
from thetaforge.engine.processor import build_context, run_document
from thetaforge.engine.stage3.s3_01_helix_layout import compute_complexity_ratio, helix_layout
from thetaforge.engine.stage3.s3_02_connection_graph import connection_graph
from thetaforge.engine.stage3.s3_03_resonance import resonance_propagation
from tests.conftest import ANCHOR_CHAIN_TEXT


def test_demo_roles_follow_operation_priority(demo_text):
    ctx = run_document(demo_text, seed=0)
    roles = [node.shape_role for node in ctx.nodes.values()]
    assert roles == [
        "Structural Anchor",   # FUSION
        "Diffraction Point",   # DIFFUSION
        "Data Vertex",         # CONSERVATION only
        "Critical Junction",   # THRESHOLD
        "Data Vertex",         # EMERGENCE only
    ]
    assert ctx.complexity_ratio == pytest.approx(0.4)


def test_demo_positions(demo_text):
    ctx = run_document(demo_text, seed=0)
    first = ctx.nodes["shard_0"]
    last = ctx.nodes["shard_4"]

    # θ=0: anchor radius 320 + 40·cos(0); height 600 + 5×45 = 825, centred
    assert first.theta_angle == 0
    assert first.spatial_pos == (360, -413, 0)
    # rotations = 2.5 + 0.4×3.5 + 5/8 = 4.525 → 1629° → 189°
    assert last.theta_angle == 189
    assert last.spatial_pos == (-215, 413, -34)
    assert ctx.nodes["shard_2"].spatial_pos[1] == 0


def test_demo_resonance_cascades_in_sweep_order(demo_text):
    ctx = run_document(demo_text, seed=0)
    integrity = [node.theta_integrity for node in ctx.nodes.values()]

    assert integrity == pytest.approx([95.0, 94.25, 89.1375, 100.0, 90.0])
    # shard_2 starts at 75 and only resonates because shard_1 was boosted first
    assert all(node.is_resonating for node in ctx.nodes.values())
    assert ctx.total_energy == 60
    assert ctx.system_resonance == 89.6


def test_spine_and_structural_edges():
    ctx = run_document(ANCHOR_CHAIN_TEXT, seed=0)
    edges = {
        nid: [(c.target_id, c.type, c.strength) for c in node.connections]
        for nid, node in ctx.nodes.items()
    }
    assert edges["shard_0"] == [
        ("shard_1", "SPINE", 1.0),
        ("shard_1", "STRUCTURAL", 0.9),
        ("shard_2", "STRUCTURAL", 0.9),
    ]
    assert edges["shard_2"] == [
        ("shard_3", "SPINE", 1.0),
        ("shard_3", "STRUCTURAL", 0.9),
    ]
    assert edges["shard_3"] == []


def test_edges_only_point_forward_to_existing_nodes(demo_text):
    ctx = run_document(demo_text + " " + ANCHOR_CHAIN_TEXT, seed=0)
    order = list(ctx.nodes)
    for idx, node in enumerate(ctx.nodes.values()):
        for conn in node.connections:
            assert conn.target_id in ctx.nodes
            assert order.index(conn.target_id) > idx


def test_integrity_is_clamped():
    ctx = run_document(ANCHOR_CHAIN_TEXT, seed=0)
    for node in ctx.nodes.values():
        assert 0.0 <= node.theta_integrity <= 100.0
        assert node.is_resonating
    assert 0.0 <= ctx.system_resonance <= 100.0


def test_theta_angle_range_on_long_document():
    text = " ".join(f"Sentence {i} has a radius of {i}." for i in range(60))
    ctx = run_document(text, seed=0)
    assert len(ctx.nodes) == 60
    assert all(0 <= node.theta_angle < 360 for node in ctx.nodes.values())
    assert all(isinstance(c, int) for node in ctx.nodes.values() for c in node.spatial_pos)


def test_single_segment_layout():
    ctx = run_document("Mass and volume.", seed=0)
    node = ctx.nodes["shard_0"]
    assert node.spatial_pos == (360, -323, 0)
    assert node.connections == []
    assert ctx.system_resonance == pytest.approx(86.5)


def test_unlabelled_segments_are_data_vertices():
    ctx = run_document("Hello there. Nothing to see.", seed=0)
    assert [n.shape_role for n in ctx.nodes.values()] == ["Data Vertex", "Data Vertex"]
    assert [n.theta_integrity for n in ctx.nodes.values()] == [75.0, 75.0]
    assert not any(n.is_resonating for n in ctx.nodes.values())
    # 75 × 0.7, no energy
    assert ctx.system_resonance == 52.5


def test_empty_context_does_not_divide_by_zero():
    ctx = PipelineContext()
    helix_layout(ctx)
    connection_graph(ctx)
    resonance_propagation(ctx)
    assert ctx.nodes == {}
    assert ctx.system_resonance == 0.0
    assert compute_complexity_ratio({}) == 0.0


def test_layout_is_deterministic(demo_text):
    a = run_document(demo_text, seed=1)
    b = run_document(demo_text, seed=2)
    assert a.nodes == b.nodes
    assert a.system_resonance == b.system_resonance


def test_node_per_segment():
    ctx = build_context("One. Two. Three has a radius of 3.")
    Pipeline().run(ctx)
    assert list(ctx.nodes) == list(ctx.segments) == list(ctx.logic)
