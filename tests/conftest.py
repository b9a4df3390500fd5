"""Test configuration and fixtures for TriMerkle.

Fixtures:
    fresh_config: isolate every test from TRIMERKLE_* environment settings
    quiet_config: TreeConfig with receipts turned off
    words: the canonical four-item dataset
    word_tree: tree built over words with sha256
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

import pytest

from trimerkle.anchor import build
from trimerkle.config import TreeConfig, set_config

ENV_VARS = ("TRIMERKLE_HASH_ALGO", "TRIMERKLE_EMIT_RECEIPTS", "TRIMERKLE_TENANT_ID")


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Clear TRIMERKLE_* variables and the cached config around each test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def quiet_config() -> TreeConfig:
    """Config that builds receipts without printing them."""
    return TreeConfig(emit_receipts=False, tenant_id="test_tenant")


@pytest.fixture
def words() -> list[str]:
    return ["Hello", "World", "Merkle", "Tree"]


@pytest.fixture
def word_tree(words):
    return build(words, "sha256")
