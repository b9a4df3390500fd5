"""Ternary Merkle tree construction.

- Empty list: tree with no root
- Hash each item into a Leaf
- Fold each level front-to-back in groups of three
- Short trailing group: pad with the group's first node
- Repeat until a single root remains
"""
from dataclasses import dataclass
from typing import Iterable

from trimerkle.config import get_config
from trimerkle.core.constants import FAN_OUT

from .hash import Hasher, encode_item, get_hasher
from .node import Branch, Leaf, Node, NodeArena


@dataclass(frozen=True)
class MerkleTree:
    """Immutable tree: node arena, root index and hash algorithm."""
    nodes: tuple[Node, ...]
    root: int | None
    leaf_count: int
    hash_algo: str

    @property
    def hasher(self) -> Hasher:
        return get_hasher(self.hash_algo)

    @property
    def is_empty(self) -> bool:
        return self.root is None


def build_root(items: Iterable, hasher: Hasher) -> tuple[tuple[Node, ...], int | None]:
    """Build the node arena for items and return (nodes, root_index).

    Leaves occupy the first len(items) arena slots, in input order.
    """
    arena = NodeArena(hasher)
    level = [arena.add_leaf(encode_item(item)) for item in items]

    if not level:
        return arena.freeze(), None

    while len(level) > 1:
        next_level = []
        for start in range(0, len(level), FAN_OUT):
            group = level[start:start + FAN_OUT]
            first = group[0]
            middle = group[1] if len(group) > 1 else first
            right = group[2] if len(group) > 2 else first
            next_level.append(arena.add_branch(first, middle, right))
        level = next_level

    return arena.freeze(), level[0]


def build(items: Iterable, algorithm: str | None = None) -> MerkleTree:
    """Build a tree over items.

    Args:
        items: Sequence of bytes, str or dict items, order-sensitive
        algorithm: Hash algorithm name; defaults to the configured one

    Returns:
        MerkleTree (root is None when items is empty)
    """
    hasher = get_hasher(algorithm or get_config().hash_algo)
    items = list(items)
    nodes, root = build_root(items, hasher)
    return MerkleTree(nodes=nodes, root=root, leaf_count=len(items), hash_algo=hasher.name)


def root_hash(tree: MerkleTree) -> bytes | None:
    if tree.root is None:
        return None
    return tree.nodes[tree.root].hash


def hash_item(item: bytes | str | dict, algorithm: str | None = None) -> bytes:
    """Leaf hash an item would carry in a tree built with algorithm."""
    hasher = get_hasher(algorithm or get_config().hash_algo)
    return hasher.leaf(encode_item(item))


def leaf_hashes(tree: MerkleTree) -> list[bytes]:
    return [node.hash for node in tree.nodes[:tree.leaf_count]]


def level_hashes(tree: MerkleTree) -> list[list[bytes]]:
    """Hashes per level, leaves first, root last."""
    if tree.root is None:
        return []

    levels = [leaf_hashes(tree)]
    start, width = 0, tree.leaf_count
    # Each level is appended to the arena right after the one below it
    while width > 1:
        start += width
        width = -(-width // FAN_OUT)
        levels.append([node.hash for node in tree.nodes[start:start + width]])
    return levels


def tree_depth(tree: MerkleTree) -> int:
    """Number of branch levels above the leaves (0 for empty or single-leaf trees)."""
    return max(len(level_hashes(tree)) - 1, 0)


def describe(tree: MerkleTree) -> dict | None:
    """Nested dict view of the tree for display. Not a storage format."""
    if tree.root is None:
        return None

    views: dict[int, dict] = {}
    # Children always precede their parent in the arena
    for index, node in enumerate(tree.nodes):
        if isinstance(node, Leaf):
            views[index] = {
                "hash": node.hash.hex(),
                "data": node.data.decode("utf-8", errors="replace"),
            }
        elif isinstance(node, Branch):
            views[index] = {
                "hash": node.hash.hex(),
                "left": views[node.left],
                "middle": views[node.middle],
                "right": views[node.right],
            }
    return views[tree.root]
