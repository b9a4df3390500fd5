"""Node model: Leaf and Branch values held in a flat arena.

Branches reference their three children by arena index. The arena is the
only place a node's hash gets computed, so a stored hash can never drift
from the data or children it was built from.
"""
from dataclasses import dataclass

from trimerkle.core.receipt import StopRule

from .hash import Hasher


@dataclass(frozen=True)
class Leaf:
    """One input item and its leaf hash."""
    hash: bytes
    data: bytes


@dataclass(frozen=True)
class Branch:
    """Internal node aggregating exactly three children (arena indices)."""
    hash: bytes
    left: int
    middle: int
    right: int

    @property
    def children(self) -> tuple[int, int, int]:
        return (self.left, self.middle, self.right)


Node = Leaf | Branch


def hash_of(node: Node) -> bytes:
    """Return the stored hash of either node variant. Never recomputes."""
    return node.hash


class NodeArena:
    """Append-only node store used while a tree is being built."""

    def __init__(self, hasher: Hasher):
        self.hasher = hasher
        self._nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def add_leaf(self, data: bytes) -> int:
        self._nodes.append(Leaf(self.hasher.leaf(data), data))
        return len(self._nodes) - 1

    def add_branch(self, left: int, middle: int, right: int) -> int:
        """Append a branch over three existing nodes and return its index.

        Raises:
            StopRule: If any child index is outside the arena
        """
        for index in (left, middle, right):
            if not 0 <= index < len(self._nodes):
                raise StopRule(f"Child index out of range: {index}")

        nodes = self._nodes
        digest = self.hasher.branch(nodes[left].hash, nodes[middle].hash, nodes[right].hash)
        nodes.append(Branch(digest, left, middle, right))
        return len(nodes) - 1

    def freeze(self) -> tuple[Node, ...]:
        return tuple(self._nodes)
