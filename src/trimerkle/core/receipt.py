"""Core receipt primitives shared by every TriMerkle boundary operation.

Functions:
    dual_hash: SHA256:BLAKE3 dual-hash format
    make_receipt: Build receipt with required fields
    emit_receipt: Emit receipt with required fields to stdout
    StopRule: Exception for stoprule triggers
"""
import hashlib
import json
from datetime import datetime, timezone

import blake3

from .constants import DEFAULT_TENANT_ID


class StopRule(Exception):
    """Raised when stoprule triggers. Never catch silently."""
    pass


def canonical_json(data: dict) -> bytes:
    """Serialize a dict to canonical JSON bytes (sorted keys, compact)."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"),
                      ensure_ascii=False, allow_nan=False).encode("utf-8")


def dual_hash(data: bytes | str | dict) -> str:
    """Compute dual hash in format 'sha256hex:blake3hex'.

    Pure function with no side effects.

    Args:
        data: Bytes, string, or dict to hash

    Returns:
        String in format 'sha256hex:blake3hex' (both 64 hex chars)
    """
    if isinstance(data, dict):
        data = canonical_json(data)
    if isinstance(data, str):
        data = data.encode("utf-8")

    sha256_hex = hashlib.sha256(data).hexdigest()
    blake3_hex = blake3.blake3(data).hexdigest()

    return f"{sha256_hex}:{blake3_hex}"


def make_receipt(receipt_type: str, data: dict,
                 tenant_id: str = DEFAULT_TENANT_ID) -> dict:
    """Build a receipt with standard required fields without printing it."""
    tenant_id = data.get("tenant_id", tenant_id)

    payload_hash = dual_hash(json.dumps(data, sort_keys=True).encode("utf-8"))

    return {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "tenant_id": tenant_id,
        "payload_hash": payload_hash,
        **data
    }


def emit_receipt(receipt_type: str, data: dict,
                 tenant_id: str = DEFAULT_TENANT_ID) -> dict:
    """Emit a receipt with standard required fields.

    Prints JSON to stdout with flush=True.

    Args:
        receipt_type: Type of receipt (anchor, proof, verify, anomaly)
        data: Receipt payload data
        tenant_id: Tenant identifier (default: "default")

    Returns:
        Complete receipt dict with receipt_type, ts, tenant_id, payload_hash
    """
    receipt = make_receipt(receipt_type, data, tenant_id)

    print(json.dumps(receipt, sort_keys=True), flush=True)

    return receipt
