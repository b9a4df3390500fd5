"""Proof verification for ternary Merkle tree inclusion."""
from enum import Enum

from trimerkle.core.constants import FAN_OUT

from .hash import HASHERS
from .prove import SLOTS, Direction, Proof


class VerifyStatus(Enum):
    VALID = "valid"
    HASH_MISMATCH = "hash_mismatch"
    MALFORMED = "malformed"


def _is_malformed(proof: Proof, digest_size: int) -> bool:
    hashes, directions = proof.proof_hashes, proof.proof_directions

    if not isinstance(hashes, (tuple, list)) or not isinstance(directions, (tuple, list)):
        return True
    if len(hashes) != len(directions) or len(hashes) % 2:
        return True
    if len(proof.target_hash) != digest_size:
        return True
    if any(not isinstance(h, bytes) or len(h) != digest_size for h in hashes):
        return True
    if any(not isinstance(d, Direction) for d in directions):
        return True
    return any(directions[i] == directions[i + 1] for i in range(0, len(directions), 2))


def check_proof(proof: Proof, expected_root: bytes) -> VerifyStatus:
    """Recompute the root from proof and compare it with expected_root.

    Never raises. Structural problems come back as MALFORMED, a wrong root
    as HASH_MISMATCH.
    """
    if not isinstance(proof, Proof) or not isinstance(proof.hash_algo, str):
        return VerifyStatus.MALFORMED
    hasher = HASHERS.get(proof.hash_algo)
    if hasher is None or not isinstance(proof.target_hash, bytes):
        return VerifyStatus.MALFORMED
    if _is_malformed(proof, hasher.digest_size):
        return VerifyStatus.MALFORMED

    current = proof.target_hash
    for (dir_a, hash_a), (dir_b, hash_b) in proof.steps():
        slots = [None] * FAN_OUT
        slots[SLOTS.index(dir_a)] = hash_a
        slots[SLOTS.index(dir_b)] = hash_b
        slots[slots.index(None)] = current
        current = hasher.branch(*slots)

    if current == expected_root:
        return VerifyStatus.VALID
    return VerifyStatus.HASH_MISMATCH


def verify_proof(proof: Proof, expected_root: bytes) -> bool:
    """True iff proof recomputes to expected_root."""
    return check_proof(proof, expected_root) is VerifyStatus.VALID
