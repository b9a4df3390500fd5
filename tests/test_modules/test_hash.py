"""Unit tests for hash module.

Functions tested: fnv1a64, get_hasher, Hasher.leaf, Hasher.branch, encode_item
"""
import hashlib

import pytest

from trimerkle.anchor.hash import HASHERS, encode_item, fnv1a64, get_hasher
from trimerkle.core.receipt import StopRule


class TestFnv1a64:
    """Tests for the fast non-cryptographic hash."""

    def test_empty_input_is_offset_basis(self):
        """FNV-1a of empty input is the 64-bit offset basis."""
        assert fnv1a64(b"") == bytes.fromhex("cbf29ce484222325")

    def test_known_vector(self):
        """FNV-1a 64 of 'a' matches the published test vector."""
        assert fnv1a64(b"a") == bytes.fromhex("af63dc4c8601ec8c")

    def test_digest_is_8_bytes(self):
        assert len(fnv1a64(b"some longer input data")) == 8


class TestHasherRegistry:
    """Tests for algorithm selection."""

    @pytest.mark.parametrize("name,size", [("fnv1a64", 8), ("sha256", 32), ("blake3", 32)])
    def test_digest_sizes(self, name, size):
        hasher = get_hasher(name)

        assert hasher.digest_size == size
        assert len(hasher.leaf(b"x")) == size
        assert len(hasher.branch(b"a" * size, b"b" * size, b"c" * size)) == size

    def test_unknown_algorithm_raises_stoprule(self):
        with pytest.raises(StopRule):
            get_hasher("md5")

    def test_registry_covers_all_algorithms(self):
        assert set(HASHERS) == {"fnv1a64", "sha256", "blake3"}


class TestEncoding:
    """Tests for the fixed leaf/branch byte encoding."""

    def test_leaf_is_domain_separated(self):
        """leaf(data) = H(0x00 || data)."""
        hasher = get_hasher("sha256")

        assert hasher.leaf(b"x") == hashlib.sha256(b"\x00x").digest()
        assert hasher.leaf(b"x") != hashlib.sha256(b"x").digest()

    def test_branch_concatenates_in_slot_order(self):
        """branch(l, m, r) = H(0x01 || l || m || r)."""
        hasher = get_hasher("sha256")
        left, middle, right = (hasher.leaf(s) for s in (b"l", b"m", b"r"))

        expected = hashlib.sha256(b"\x01" + left + middle + right).digest()

        assert hasher.branch(left, middle, right) == expected
        assert hasher.branch(right, middle, left) != expected

    def test_leaf_and_branch_never_share_preimage(self):
        """A branch over three digests differs from a leaf over their concatenation."""
        hasher = get_hasher("blake3")
        parts = [hasher.leaf(s) for s in (b"a", b"b", b"c")]

        assert hasher.branch(*parts) != hasher.leaf(b"".join(parts))


class TestEncodeItem:
    """Tests for item serialization."""

    def test_bytes_pass_through(self):
        assert encode_item(b"\x00\xff") == b"\x00\xff"

    def test_str_is_utf8(self):
        assert encode_item("héllo") == "héllo".encode("utf-8")

    def test_dict_is_canonical_json(self):
        """Key order does not change the encoding."""
        assert encode_item({"b": 1, "a": 2}) == b'{"a":2,"b":1}'
        assert encode_item({"a": 2, "b": 1}) == encode_item({"b": 1, "a": 2})

    def test_unsupported_type_raises_stoprule(self):
        with pytest.raises(StopRule):
            encode_item(42)

    @pytest.mark.parametrize("item", [{"k": {1, 2}}, {"k": float("nan")}])
    def test_unencodable_dict_raises_stoprule(self, item):
        """Dict values JSON cannot encode surface as StopRule."""
        with pytest.raises(StopRule):
            encode_item(item)

    def test_build_rejects_unencodable_dict(self):
        from trimerkle.anchor.merkle import build

        with pytest.raises(StopRule):
            build([{"k": {1, 2}}], "sha256")
