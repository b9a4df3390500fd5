"""Proof path generation for ternary Merkle tree inclusion.

A proof carries, for every level from the target up to the root, the hashes
of the two siblings that were aggregated alongside the path node and the
slots they occupied. The target's own slot is whichever one is missing.
"""
from dataclasses import dataclass
from enum import Enum

from trimerkle.core.constants import FAN_OUT
from trimerkle.core.receipt import StopRule

from .hash import encode_item
from .merkle import MerkleTree
from .node import Branch


class Direction(Enum):
    """Slot a sibling subtree occupied when its branch was aggregated."""
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


SLOTS = (Direction.LEFT, Direction.MIDDLE, Direction.RIGHT)


@dataclass(frozen=True)
class Proof:
    """Membership evidence. Holds copied digests, never tree nodes."""
    target_hash: bytes
    proof_hashes: tuple[bytes, ...]
    proof_directions: tuple[Direction, ...]
    hash_algo: str

    @property
    def depth(self) -> int:
        """Number of levels between the target and the root."""
        return len(self.proof_hashes) // 2

    def steps(self) -> list[tuple[tuple[Direction, bytes], tuple[Direction, bytes]]]:
        """Sibling pairs per level, leaf to root."""
        pairs = list(zip(self.proof_directions, self.proof_hashes))
        return [(pairs[i], pairs[i + 1]) for i in range(0, len(pairs) - 1, 2)]

    def to_dict(self) -> dict:
        return {
            "hash_algo": self.hash_algo,
            "target_hash": self.target_hash.hex(),
            "proof_path": [
                {"hash": h.hex(), "position": d.value}
                for h, d in zip(self.proof_hashes, self.proof_directions)
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Proof":
        """Rebuild a proof from to_dict() output.

        Raises:
            StopRule: On missing fields, bad hex or unknown positions
        """
        try:
            path = data["proof_path"]
            return cls(
                target_hash=bytes.fromhex(data["target_hash"]),
                proof_hashes=tuple(bytes.fromhex(step["hash"]) for step in path),
                proof_directions=tuple(Direction(step["position"]) for step in path),
                hash_algo=data["hash_algo"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StopRule(f"Invalid proof document: {e}") from e


def find_path(tree: MerkleTree, target_hash: bytes) -> list[tuple[int, int]] | None:
    """Depth-first, pre-order search for a node carrying target_hash.

    Returns:
        (branch_index, slot) for every ancestor of the match, root first;
        [] if the root itself matches; None if nothing matches
    """
    if tree.root is None:
        return None

    nodes = tree.nodes
    root = nodes[tree.root]
    if root.hash == target_hash:
        return []
    if not isinstance(root, Branch):
        return None

    # Frames hold (branch_index, next_slot); every frame is an ancestor
    stack = [(tree.root, 0)]
    while stack:
        index, slot = stack.pop()
        if slot == FAN_OUT:
            continue
        stack.append((index, slot + 1))

        children = nodes[index].children
        child = children[slot]
        # Padding repeats a child; it already failed in its earlier slot
        if child in children[:slot]:
            continue

        node = nodes[child]
        if node.hash == target_hash:
            return [(i, s - 1) for i, s in stack]
        if isinstance(node, Branch):
            stack.append((child, 0))

    return None


def generate_proof_for_hash(tree: MerkleTree, target_hash: bytes) -> Proof | None:
    """Build a proof for a precomputed digest, or None if it is absent."""
    path = find_path(tree, target_hash)
    if path is None:
        return None

    proof_hashes = []
    proof_directions = []
    for index, slot in reversed(path):
        children = tree.nodes[index].children
        for sibling_slot in range(FAN_OUT):
            if sibling_slot == slot:
                continue
            proof_hashes.append(tree.nodes[children[sibling_slot]].hash)
            proof_directions.append(SLOTS[sibling_slot])

    return Proof(
        target_hash=target_hash,
        proof_hashes=tuple(proof_hashes),
        proof_directions=tuple(proof_directions),
        hash_algo=tree.hash_algo,
    )


def generate_proof(tree: MerkleTree, item: bytes | str | dict) -> Proof | None:
    """Generate a membership proof for item.

    Returns:
        Proof, or None if the tree is empty or item is not in it
    """
    if tree.root is None:
        return None
    return generate_proof_for_hash(tree, tree.hasher.leaf(encode_item(item)))
