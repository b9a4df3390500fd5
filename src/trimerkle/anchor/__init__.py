"""Ternary Merkle trees: build, prove, verify.

Pure functions only. Nothing in this subpackage does I/O or emits receipts.
"""
from .hash import HASHERS, Hasher, encode_item, get_hasher
from .merkle import (
    MerkleTree,
    build,
    build_root,
    describe,
    hash_item,
    leaf_hashes,
    level_hashes,
    root_hash,
    tree_depth,
)
from .node import Branch, Leaf, Node, NodeArena, hash_of
from .prove import Direction, Proof, find_path, generate_proof, generate_proof_for_hash
from .verify import VerifyStatus, check_proof, verify_proof

PROOF_SCHEMA = {
    "hash_algo": "str",
    "target_hash": "hex",
    "proof_path": [{"hash": "hex", "position": "left|middle|right"}],
}

__all__ = [
    "HASHERS", "Hasher", "encode_item", "get_hasher",
    "MerkleTree", "build", "build_root", "describe", "hash_item",
    "leaf_hashes", "level_hashes", "root_hash", "tree_depth",
    "Branch", "Leaf", "Node", "NodeArena", "hash_of",
    "Direction", "Proof", "find_path", "generate_proof", "generate_proof_for_hash",
    "VerifyStatus", "check_proof", "verify_proof",
    "PROOF_SCHEMA",
]
