"""Tests for Stage 4 — cross-category superposition pairing."""

from thetaforge.engine.processor import process, run_document
from tests.conftest import BIO_SENTENCE, SOFTWARE_SENTENCE, ScriptedRng


def _alternating(n_pairs: int) -> str:
    return " ".join(f"{BIO_SENTENCE} {SOFTWARE_SENTENCE}" for _ in range(n_pairs))


def test_table_pair_uses_literal_entry():
    rng = ScriptedRng([0.25])
    result = process(f"{BIO_SENTENCE} {SOFTWARE_SENTENCE}", rng=rng)
    nodes = result.stage4.quantum_nodes

    assert len(nodes) == 1
    node = nodes[0]
    assert node.id == "quantum_0_1"
    assert (node.source_a_id, node.source_b_id) == ("shard_0", "shard_1")
    assert node.gate_type == "XOR"
    assert node.hypothetical_output == "Bio-Digital Entropy"
    assert node.probability == 0.95
    assert node.category_mix == "BIOLOGICAL + SOFTWARE"
    # Only the entropy draw touched the random source
    assert rng.calls == 1
    assert result.stage4.entropy_level == 25.0


def test_table_key_is_order_independent():
    result = process(f"{SOFTWARE_SENTENCE} {BIO_SENTENCE}", seed=0)
    node = result.stage4.quantum_nodes[0]
    assert node.hypothetical_output == "Bio-Digital Entropy"
    assert node.category_mix == "SOFTWARE + BIOLOGICAL"


def test_same_category_pairs_never_combine():
    result = process("The radius is 1. The radius is 2. The radius is 3.", seed=0)
    assert result.stage4.quantum_nodes == []


def test_cap_truncates_in_enumeration_order():
    ctx = run_document(_alternating(10), seed=0)
    ids = [q.id for q in ctx.quantum_nodes]

    assert len(ids) == 24
    assert ids[:10] == [f"quantum_0_{j}" for j in range(1, 20, 2)]
    assert ids[-1] == "quantum_2_11"
    assert len({(q.source_a_id, q.source_b_id) for q in ctx.quantum_nodes}) == 24


def test_fallback_skips_below_threshold():
    # numerical (radius) + video (frame rate) has no table entry
    rng = ScriptedRng([0.1, 0.5])
    ctx = run_document("The radius is 4. The frame rate is 30.", rng=rng)
    assert ctx.quantum_nodes == []
    assert ctx.entropy_level == 50.0


def test_fallback_emits_generic_xor():
    rng = ScriptedRng([0.3, 0.42, 0.99])
    ctx = run_document("The radius is 4. The frame rate is 30.", rng=rng)
    assert len(ctx.quantum_nodes) == 1
    node = ctx.quantum_nodes[0]
    assert node.gate_type == "XOR"
    assert node.hypothetical_output == "Vector-radius"
    assert node.probability == 0.42
    assert "radius and frame rate" in node.stability_description
    assert node.category_mix == "NUMERICAL + VIDEO"
    assert ctx.entropy_level == 99.0


def test_unlabelled_segment_pairs_as_unknown():
    rng = ScriptedRng([0.9, 0.1, 0.0])
    ctx = run_document("Hello there. The radius is 4.", rng=rng)
    node = ctx.quantum_nodes[0]
    assert node.category_mix == "UNKNOWN + NUMERICAL"
    assert node.hypothetical_output == "Vector-unknown"


def test_seeded_runs_are_reproducible(demo_text):
    a = process(demo_text, seed=42)
    b = process(demo_text, seed=42)
    assert a == b
    assert 0.0 <= a.stage4.entropy_level < 100.0
    for node in a.stage4.quantum_nodes:
        assert 0.0 <= node.probability <= 1.0


def test_empty_document_has_no_combinations():
    result = process("", seed=0)
    assert result.stage4.quantum_nodes == []
    assert 0.0 <= result.stage4.entropy_level < 100.0
