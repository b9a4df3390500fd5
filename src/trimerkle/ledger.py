"""Receipt-emitting boundary around the pure tree operations.

Every call here emits a receipt to stdout (unless the configuration turns
receipts off) and returns it alongside the result. With receipts off the
same receipt dict is still built and returned.
"""
from typing import Iterable

from trimerkle.anchor import (
    MerkleTree,
    Proof,
    VerifyStatus,
    build,
    check_proof,
    generate_proof,
    hash_item,
    root_hash,
    tree_depth,
)
from trimerkle.config import TreeConfig, get_config
from trimerkle.core.receipt import emit_receipt, make_receipt


def _emit(receipt_type: str, data: dict, config: TreeConfig) -> dict:
    if config.emit_receipts:
        return emit_receipt(receipt_type, data, config.tenant_id)
    return make_receipt(receipt_type, data, config.tenant_id)


def anchor_items(items: Iterable, config: TreeConfig | None = None) -> tuple[MerkleTree, dict]:
    """Build a tree over items and emit an anchor receipt."""
    config = config or get_config()
    tree = build(items, config.hash_algo)
    root = root_hash(tree)

    receipt = _emit("anchor", {
        "merkle_root": root.hex() if root is not None else None,
        "hash_algo": tree.hash_algo,
        "leaf_count": tree.leaf_count,
        "tree_depth": tree_depth(tree),
    }, config)
    return tree, receipt


def prove_item(tree: MerkleTree, item, config: TreeConfig | None = None) -> tuple[Proof | None, dict]:
    """Generate a proof for item and emit a proof receipt (found or not)."""
    config = config or get_config()
    proof = generate_proof(tree, item)

    receipt = _emit("proof", {
        "hash_algo": tree.hash_algo,
        "target_hash": hash_item(item, tree.hash_algo).hex(),
        "found": proof is not None,
        "proof_depth": proof.depth if proof is not None else 0,
    }, config)
    return proof, receipt


def verify_item(proof: Proof, expected_root: bytes, config: TreeConfig | None = None) -> dict:
    """Verify proof against expected_root and emit a verify receipt.

    A malformed proof also emits an anomaly receipt.
    """
    config = config or get_config()
    status = check_proof(proof, expected_root)
    target = getattr(proof, "target_hash", b"")

    if status is VerifyStatus.MALFORMED:
        _emit("anomaly", {
            "metric": "proof_structure",
            "classification": "violation",
            "action": "reject",
        }, config)

    return _emit("verify", {
        "target_hash": target.hex() if isinstance(target, bytes) else "",
        "merkle_root": expected_root.hex(),
        "proof_valid": status is VerifyStatus.VALID,
        "status": status.value,
    }, config)
