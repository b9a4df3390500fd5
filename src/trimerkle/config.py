"""TriMerkle configuration.

All settings can be overridden via environment variables with the
TRIMERKLE_ prefix:

    TRIMERKLE_HASH_ALGO       fnv1a64 | sha256 | blake3
    TRIMERKLE_EMIT_RECEIPTS   true | false
    TRIMERKLE_TENANT_ID       tenant stamped on every receipt
"""
import os
from dataclasses import dataclass

from trimerkle.core.constants import (
    DEFAULT_TENANT_ID,
    ENV_PREFIX,
    HASH_ALGO_DEFAULT,
    HASH_ALGOS,
)
from trimerkle.core.receipt import StopRule


@dataclass
class TreeConfig:
    """Tree and receipt configuration."""

    hash_algo: str = HASH_ALGO_DEFAULT
    emit_receipts: bool = True
    tenant_id: str = DEFAULT_TENANT_ID

    @classmethod
    def from_env(cls) -> "TreeConfig":
        """Load configuration from environment variables."""
        config = cls()

        if f"{ENV_PREFIX}HASH_ALGO" in os.environ:
            config.hash_algo = os.environ[f"{ENV_PREFIX}HASH_ALGO"].strip().lower()
        if f"{ENV_PREFIX}EMIT_RECEIPTS" in os.environ:
            config.emit_receipts = os.environ[f"{ENV_PREFIX}EMIT_RECEIPTS"].lower() == "true"
        if f"{ENV_PREFIX}TENANT_ID" in os.environ:
            config.tenant_id = os.environ[f"{ENV_PREFIX}TENANT_ID"]

        return config

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []

        if self.hash_algo not in HASH_ALGOS:
            errors.append(f"Unknown hash_algo: {self.hash_algo} (expected one of {', '.join(HASH_ALGOS)})")

        if not self.tenant_id:
            errors.append("tenant_id must be non-empty")

        return errors


_config: TreeConfig | None = None


def get_config() -> TreeConfig:
    """Return the process configuration, loading it from the environment once.

    Raises:
        StopRule: If the environment holds an invalid configuration
    """
    global _config
    if _config is None:
        config = TreeConfig.from_env()
        errors = config.validate()
        if errors:
            raise StopRule("Invalid configuration: " + "; ".join(errors))
        _config = config
    return _config


def set_config(config: TreeConfig | None) -> None:
    """Replace the process configuration. None reloads from the environment on next use."""
    global _config
    _config = config
