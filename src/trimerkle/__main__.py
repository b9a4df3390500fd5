"""
Entry point for running TriMerkle as a module.

Usage:
    python -m trimerkle [command] [options]

Example:
    python -m trimerkle tree root --data Hello --data World
    python -m trimerkle tree prove Tree --items items.txt --out proof.json
    python -m trimerkle tree verify proof.json --root <hex>
"""

from trimerkle.cli.main import cli

if __name__ == "__main__":
    cli()
