"""Core subpackage for TriMerkle receipt primitives.

Exports all from receipt.py, schemas.py, and constants.py.
"""
from .receipt import StopRule, canonical_json, dual_hash, emit_receipt, make_receipt
from .schemas import RECEIPT_SCHEMAS, REQUIRED_FIELDS, validate_receipt
from .constants import (
    FAN_OUT,
    HASH_ALGO_BLAKE3,
    HASH_ALGO_DEFAULT,
    HASH_ALGO_FNV1A64,
    HASH_ALGO_SHA256,
    HASH_ALGOS,
    DEFAULT_TENANT_ID,
)

__all__ = [
    # Receipt primitives
    "StopRule",
    "canonical_json",
    "dual_hash",
    "emit_receipt",
    "make_receipt",
    # Schemas
    "RECEIPT_SCHEMAS",
    "REQUIRED_FIELDS",
    "validate_receipt",
    # Constants
    "FAN_OUT",
    "HASH_ALGO_BLAKE3",
    "HASH_ALGO_DEFAULT",
    "HASH_ALGO_FNV1A64",
    "HASH_ALGO_SHA256",
    "HASH_ALGOS",
    "DEFAULT_TENANT_ID",
]
