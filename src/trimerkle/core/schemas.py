"""Receipt schema definitions and validation.

Constants:
    RECEIPT_SCHEMAS: Schema dicts keyed by receipt_type
    REQUIRED_FIELDS: Fields required in all receipts

Functions:
    validate_receipt: Validate receipt against schema
"""
from .receipt import StopRule


# Required fields for all receipt types
REQUIRED_FIELDS = ["receipt_type", "ts", "tenant_id", "payload_hash"]


RECEIPT_SCHEMAS = {
    "anchor": {
        "receipt_type": str,
        "ts": str,
        "tenant_id": str,
        "payload_hash": str,
        "merkle_root": (str, type(None)),  # null for empty trees
        "hash_algo": str,
        "leaf_count": int,
        "tree_depth": int,
    },
    "proof": {
        "receipt_type": str,
        "ts": str,
        "tenant_id": str,
        "payload_hash": str,
        "hash_algo": str,
        "target_hash": str,
        "found": bool,
        "proof_depth": int,
    },
    "verify": {
        "receipt_type": str,
        "ts": str,
        "tenant_id": str,
        "payload_hash": str,
        "target_hash": str,
        "merkle_root": str,
        "proof_valid": bool,
        "status": str,  # valid | hash_mismatch | malformed
    },
    "anomaly": {
        "receipt_type": str,
        "ts": str,
        "tenant_id": str,
        "payload_hash": str,
        "metric": str,
        "classification": str,
        "action": str,
    },
}


def validate_receipt(receipt: dict) -> bool:
    """Validate receipt has required fields and matches schema.

    Args:
        receipt: Receipt dict to validate

    Returns:
        True if valid

    Raises:
        StopRule: If validation fails (missing field, wrong type or
            unknown receipt_type)
    """
    if not isinstance(receipt, dict):
        raise StopRule("Receipt must be a dict")

    for field in REQUIRED_FIELDS:
        if field not in receipt:
            raise StopRule(f"Missing required field: {field}")

    receipt_type = receipt["receipt_type"]
    if receipt_type not in RECEIPT_SCHEMAS:
        raise StopRule(f"Unknown receipt_type: {receipt_type}")

    for field, expected in RECEIPT_SCHEMAS[receipt_type].items():
        if field not in receipt:
            raise StopRule(f"Missing {receipt_type} field: {field}")
        value = receipt[field]
        # bool is an int subclass; keep counts honest
        if expected is int and isinstance(value, bool):
            raise StopRule(f"Field {field} must be int, got bool")
        if not isinstance(value, expected):
            raise StopRule(f"Field {field} has wrong type: {type(value).__name__}")

    return True
