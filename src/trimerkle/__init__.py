"""
TriMerkle - Ternary Merkle Trees with Self-Verifying Membership Proofs

Every branch aggregates exactly three children. Every proof carries the two
sibling hashes per level needed to recompute the root from one item.

    tree = build([b"Hello", b"World", b"Merkle", b"Tree"])
    proof = generate_proof(tree, b"Tree")
    assert verify_proof(proof, root_hash(tree))
"""

__version__ = "0.1.0"

from trimerkle.anchor import (
    Direction,
    MerkleTree,
    Proof,
    VerifyStatus,
    build,
    check_proof,
    generate_proof,
    hash_item,
    root_hash,
    verify_proof,
)
from trimerkle.config import TreeConfig, get_config, set_config
from trimerkle.core.receipt import StopRule

__all__ = [
    "Direction",
    "MerkleTree",
    "Proof",
    "VerifyStatus",
    "build",
    "check_proof",
    "generate_proof",
    "hash_item",
    "root_hash",
    "verify_proof",
    "TreeConfig",
    "get_config",
    "set_config",
    "StopRule",
    "__version__",
]
