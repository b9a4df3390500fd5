"""TriMerkle constants.

All magic numbers live here. No exceptions.
"""

# Tree shape
FAN_OUT = 3

# Hash algorithms
HASH_ALGO_FNV1A64 = "fnv1a64"    # Fast, non-cryptographic. Testing only.
HASH_ALGO_SHA256 = "sha256"
HASH_ALGO_BLAKE3 = "blake3"
HASH_ALGOS = (HASH_ALGO_FNV1A64, HASH_ALGO_SHA256, HASH_ALGO_BLAKE3)
HASH_ALGO_DEFAULT = HASH_ALGO_SHA256

# FNV-1a 64-bit parameters
FNV1A64_OFFSET_BASIS = 14695981039346656037
FNV1A64_PRIME = 1099511628211
FNV1A64_MASK = 0xFFFFFFFFFFFFFFFF

# Aggregation encoding. Changing these breaks every stored root and proof.
LEAF_PREFIX = b"\x00"
BRANCH_PREFIX = b"\x01"

# Receipts
DEFAULT_TENANT_ID = "default"
ENV_PREFIX = "TRIMERKLE_"
