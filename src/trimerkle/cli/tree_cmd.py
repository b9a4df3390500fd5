"""Tree commands: hash, root, prove, verify, show."""
import json
import sys
import time
from dataclasses import replace

import click

from trimerkle.anchor import Proof, build, describe, hash_item
from trimerkle.config import TreeConfig, get_config
from trimerkle.core.constants import HASH_ALGOS
from trimerkle.core.receipt import StopRule
from trimerkle.ledger import anchor_items, prove_item, verify_item

from .output import error_box, print_json, success_box

ALGO_OPTION = click.option('--algo', type=click.Choice(HASH_ALGOS), default=None,
                           help='Hash algorithm (default: TRIMERKLE_HASH_ALGO or sha256)')


def _config(algo: str | None) -> TreeConfig:
    config = get_config()
    return replace(config, hash_algo=algo) if algo else config


def _collect_items(items: str | None, data: tuple) -> list[str]:
    """Items file lines (non-empty) followed by inline --data values."""
    item_list = []
    if items:
        with open(items, encoding="utf-8") as f:
            item_list.extend(line.rstrip("\r\n") for line in f if line.strip())
    item_list.extend(data)
    return item_list


@click.group()
def tree():
    """Ternary Merkle tree operations."""
    pass


@tree.command("hash")
@click.argument('data')
@ALGO_OPTION
def hash_cmd(data: str, algo: str | None):
    """Compute the leaf hash of one item."""
    try:
        config = _config(algo)
        digest = hash_item(data, config.hash_algo)
        success_box("Leaf Hash", [
            ("Input", data[:40]),
            ("Algorithm", config.hash_algo),
            ("Hash", digest.hex()),
        ], "trimerkle tree root --data ...")
        sys.exit(0)

    except StopRule as e:
        error_box("Hash: ERROR", str(e))
        sys.exit(2)


@tree.command()
@click.option('--items', type=click.Path(exists=True), help='Items file, one item per line')
@click.option('--data', multiple=True, help='Inline data items')
@ALGO_OPTION
def root(items: str | None, data: tuple, algo: str | None):
    """Compute the root hash of items."""
    t0 = time.perf_counter()
    try:
        item_list = _collect_items(items, data)
        if not item_list:
            error_box("Root: NO DATA", "Provide --items or --data",
                      fix_cmd="trimerkle tree root --data <item> [--data <item> ...]")
            sys.exit(2)

        tree_, receipt = anchor_items(item_list, _config(algo))
        elapsed_ms = int((time.perf_counter() - t0) * 1000)

        success_box("Merkle Root", [
            ("Items", str(tree_.leaf_count)),
            ("Depth", str(receipt["tree_depth"])),
            ("Algorithm", tree_.hash_algo),
            ("Root", receipt["merkle_root"]),
            ("Duration", f"{elapsed_ms}ms"),
        ], "trimerkle tree prove <item> --out proof.json")
        sys.exit(0)

    except (StopRule, OSError) as e:
        error_box("Root: ERROR", str(e))
        sys.exit(2)


@tree.command()
@click.argument('target')
@click.option('--items', type=click.Path(exists=True), help='Items file, one item per line')
@click.option('--data', multiple=True, help='Inline data items')
@click.option('--out', type=click.Path(dir_okay=False, writable=True), help='Write proof JSON here')
@ALGO_OPTION
def prove(target: str, items: str | None, data: tuple, out: str | None, algo: str | None):
    """Generate a membership proof for TARGET."""
    t0 = time.perf_counter()
    try:
        config = _config(algo)
        tree_, anchor_receipt = anchor_items(_collect_items(items, data), config)
        proof, _ = prove_item(tree_, target, config)
        elapsed_ms = int((time.perf_counter() - t0) * 1000)

        if proof is None:
            error_box("Prove: NOT FOUND", f"Item not in tree: {target}")
            sys.exit(1)

        if out:
            with open(out, "w", encoding="utf-8") as f:
                json.dump(proof.to_dict(), f, indent=2, sort_keys=True)
        else:
            print_json(proof.to_dict())

        success_box("Proof Generated", [
            ("Target", target[:40]),
            ("Depth", str(proof.depth)),
            ("Root", anchor_receipt["merkle_root"]),
            ("Duration", f"{elapsed_ms}ms"),
        ], f"trimerkle tree verify {out or 'proof.json'} --root {anchor_receipt['merkle_root']}")
        sys.exit(0)

    except (StopRule, OSError) as e:
        error_box("Prove: ERROR", str(e))
        sys.exit(2)


@tree.command()
@click.argument('proof_file', type=click.Path(exists=True))
@click.option('--root', 'root_hex', required=True, help='Expected merkle root (hex)')
def verify(proof_file: str, root_hex: str):
    """Verify a proof file against an expected root."""
    t0 = time.perf_counter()
    try:
        with open(proof_file, encoding="utf-8") as f:
            proof = Proof.from_dict(json.load(f))
        expected_root = bytes.fromhex(root_hex)

        receipt = verify_item(proof, expected_root)
        elapsed_ms = int((time.perf_counter() - t0) * 1000)

        status = receipt["status"]
        if status == "valid":
            success_box("Verify: VALID", [
                ("Target", receipt["target_hash"]),
                ("Root", root_hex),
                ("Proof depth", str(proof.depth)),
                ("Duration", f"{elapsed_ms}ms"),
            ])
            sys.exit(0)
        elif status == "hash_mismatch":
            error_box("Verify: INVALID", "Proof does not recompute to root")
            sys.exit(1)
        else:
            error_box("Verify: MALFORMED", "Proof structure is inconsistent",
                      fix_cmd="trimerkle tree prove <item> --items <file> --out proof.json")
            sys.exit(2)

    except (StopRule, OSError, ValueError) as e:
        error_box("Verify: ERROR", str(e))
        sys.exit(2)


@tree.command()
@click.option('--items', type=click.Path(exists=True), help='Items file, one item per line')
@click.option('--data', multiple=True, help='Inline data items')
@ALGO_OPTION
def show(items: str | None, data: tuple, algo: str | None):
    """Print the tree structure as JSON."""
    try:
        print_json(describe(build(_collect_items(items, data), _config(algo).hash_algo)))
        sys.exit(0)

    except (StopRule, OSError) as e:
        error_box("Show: ERROR", str(e))
        sys.exit(2)
