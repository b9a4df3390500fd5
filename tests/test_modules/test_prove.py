"""Unit tests for proof generation.

Functions tested: find_path, generate_proof, generate_proof_for_hash, Proof
"""
import pytest

from trimerkle.anchor.merkle import build, hash_item, root_hash
from trimerkle.anchor.prove import (
    Direction,
    Proof,
    find_path,
    generate_proof,
    generate_proof_for_hash,
)
from trimerkle.core.receipt import StopRule


class TestGenerateProof:
    """Tests for membership proof generation."""

    def test_empty_tree_has_no_proof(self):
        assert generate_proof(build([], "sha256"), "x") is None

    def test_absent_item_has_no_proof(self, word_tree):
        assert generate_proof(word_tree, "Absent") is None

    def test_every_item_has_proof(self, word_tree, words):
        for word in words:
            proof = generate_proof(word_tree, word)
            assert proof is not None, f"Should generate proof for {word}"
            assert proof.target_hash == hash_item(word, "sha256")

    def test_proof_records_two_siblings_per_level(self, word_tree):
        proof = generate_proof(word_tree, "Hello")

        assert proof.depth == 2
        assert len(proof.proof_hashes) == 4
        assert len(proof.proof_directions) == 4

    def test_tree_leaf_sibling_evidence(self, word_tree):
        """'Tree' sits alone in Branch(T, T, T), then in the root's middle slot."""
        tree_hash = hash_item("Tree", "sha256")
        first_branch = word_tree.nodes[4].hash

        proof = generate_proof(word_tree, "Tree")

        assert proof.proof_hashes == (tree_hash, tree_hash, first_branch, first_branch)
        assert proof.proof_directions == (
            Direction.MIDDLE, Direction.RIGHT, Direction.LEFT, Direction.RIGHT,
        )

    def test_siblings_exclude_path_slot(self, word_tree, words):
        """Within each level the two recorded slots differ."""
        for word in words:
            for (dir_a, _), (dir_b, _) in generate_proof(word_tree, word).steps():
                assert dir_a != dir_b

    def test_singleton_proof_is_empty(self):
        tree = build(["only"], "sha256")

        proof = generate_proof(tree, "only")

        assert proof.depth == 0
        assert proof.proof_hashes == ()
        assert proof.target_hash == root_hash(tree)

    def test_duplicate_items_prove_first_occurrence(self):
        tree = build(["a", "b", "a", "c"], "sha256")

        path = find_path(tree, hash_item("a", "sha256"))

        assert path == [(tree.root, 0), (4, 0)]

    def test_proof_holds_no_tree_references(self, word_tree):
        proof = generate_proof(word_tree, "World")

        assert all(isinstance(h, bytes) for h in proof.proof_hashes)
        assert proof.hash_algo == "sha256"


class TestBranchMatch:
    """A target equal to an internal node's hash stops the search there."""

    def test_root_hash_matches_root(self, word_tree):
        proof = generate_proof_for_hash(word_tree, root_hash(word_tree))

        assert proof is not None
        assert proof.depth == 0

    def test_internal_branch_match(self, word_tree):
        branch_hash = word_tree.nodes[4].hash

        path = find_path(word_tree, branch_hash)
        proof = generate_proof_for_hash(word_tree, branch_hash)

        assert path == [(word_tree.root, 0)]
        assert proof.proof_directions == (Direction.MIDDLE, Direction.RIGHT)
        assert proof.proof_hashes == (word_tree.nodes[5].hash, branch_hash)


class TestFindPath:
    """Tests for the iterative depth-first search."""

    def test_empty_tree(self):
        assert find_path(build([], "sha256"), b"\x00" * 32) is None

    def test_single_leaf_mismatch(self):
        assert find_path(build(["a"], "sha256"), hash_item("b", "sha256")) is None

    def test_deep_tree_last_leaf(self):
        """3**7 + 1 leaves pad the last leaf alone at every level."""
        items = [f"leaf_{i}" for i in range(3 ** 7 + 1)]
        tree = build(items, "fnv1a64")

        path = find_path(tree, hash_item(items[-1], "fnv1a64"))

        assert path is not None
        assert len(path) == 8


class TestProofDocument:
    """Tests for the hex JSON view of a proof."""

    def test_to_dict_then_from_dict(self, word_tree):
        proof = generate_proof(word_tree, "Merkle")

        restored = Proof.from_dict(proof.to_dict())

        assert restored == proof

    def test_to_dict_positions(self, word_tree):
        doc = generate_proof(word_tree, "Tree").to_dict()

        assert [step["position"] for step in doc["proof_path"]] == \
            ["middle", "right", "left", "right"]
        assert doc["hash_algo"] == "sha256"

    @pytest.mark.parametrize("doc", [
        {},
        {"hash_algo": "sha256", "target_hash": "zz", "proof_path": []},
        {"hash_algo": "sha256", "target_hash": "00", "proof_path": [{"hash": "00", "position": "up"}]},
        {"hash_algo": "sha256", "target_hash": "00", "proof_path": [{"position": "left"}]},
        ["not", "a", "dict"],
    ])
    def test_invalid_documents_raise_stoprule(self, doc):
        with pytest.raises(StopRule):
            Proof.from_dict(doc)
