"""Hash functions for leaf and branch aggregation.

Every algorithm uses the same byte encoding:

    leaf(data)             = H(0x00 || data)
    branch(left, mid, right) = H(0x01 || left || mid || right)

fnv1a64 is fast and non-cryptographic. Use sha256 or blake3 wherever
tamper-evidence matters.
"""
import hashlib
from dataclasses import dataclass
from typing import Callable

import blake3

from trimerkle.core.constants import (
    BRANCH_PREFIX,
    FNV1A64_MASK,
    FNV1A64_OFFSET_BASIS,
    FNV1A64_PRIME,
    HASH_ALGO_BLAKE3,
    HASH_ALGO_FNV1A64,
    HASH_ALGO_SHA256,
    LEAF_PREFIX,
)
from trimerkle.core.receipt import StopRule, canonical_json


def fnv1a64(data: bytes) -> bytes:
    """64-bit FNV-1a over data, as an 8-byte big-endian digest."""
    h = FNV1A64_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV1A64_PRIME) & FNV1A64_MASK
    return h.to_bytes(8, "big")


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def blake3_digest(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


@dataclass(frozen=True)
class Hasher:
    """A named digest function plus the fixed leaf/branch encoding."""
    name: str
    digest_size: int
    digest: Callable[[bytes], bytes]

    def leaf(self, data: bytes) -> bytes:
        return self.digest(LEAF_PREFIX + data)

    def branch(self, left: bytes, middle: bytes, right: bytes) -> bytes:
        return self.digest(BRANCH_PREFIX + left + middle + right)


HASHERS = {
    HASH_ALGO_FNV1A64: Hasher(HASH_ALGO_FNV1A64, 8, fnv1a64),
    HASH_ALGO_SHA256: Hasher(HASH_ALGO_SHA256, 32, sha256),
    HASH_ALGO_BLAKE3: Hasher(HASH_ALGO_BLAKE3, 32, blake3_digest),
}


def get_hasher(name: str) -> Hasher:
    """Look up a hasher by algorithm name.

    Raises:
        StopRule: If the algorithm is not recognized
    """
    try:
        return HASHERS[name]
    except KeyError:
        raise StopRule(f"Unknown hash algorithm: {name}") from None


def encode_item(item: bytes | str | dict) -> bytes:
    """Serialize an item to the bytes that get hashed.

    bytes pass through, str is UTF-8 encoded, dict becomes canonical JSON.
    """
    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)
    if isinstance(item, str):
        return item.encode("utf-8")
    if isinstance(item, dict):
        try:
            return canonical_json(item)
        except (TypeError, ValueError) as e:
            raise StopRule(f"Item is not JSON encodable: {e}") from e
    raise StopRule(f"Unsupported item type: {type(item).__name__}")
