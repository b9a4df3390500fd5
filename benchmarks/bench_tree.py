"""Benchmark: ternary tree build, prove and verify.

Target SLO: build 1000 leaves in <100ms.
"""
import time

from trimerkle.anchor import build, generate_proof, root_hash, verify_proof


def _items(n: int) -> list[str]:
    return [f"bench_item_{i}" for i in range(n)]


class TestTreePerformance:
    """Benchmark tree operations."""

    def test_build_1000_items(self, benchmark):
        """Build 1000 leaves."""
        items = _items(1000)

        result = benchmark(build, items, "sha256")
        assert result.leaf_count == 1000

    def test_build_10000_items(self, benchmark):
        """Build 10000 leaves - stress test."""
        items = _items(10000)

        result = benchmark(build, items, "blake3")
        assert result.root is not None

    def test_prove_last_of_10000(self, benchmark):
        """Worst case search: the last leaf is found after every other subtree."""
        items = _items(10000)
        tree = build(items, "sha256")

        proof = benchmark(generate_proof, tree, items[-1])
        assert proof is not None

    def test_verify(self, benchmark):
        items = _items(10000)
        tree = build(items, "sha256")
        proof = generate_proof(tree, items[5000])
        root = root_hash(tree)

        assert benchmark(verify_proof, proof, root)


def manual_benchmark():
    """Manual benchmark for verification."""
    sizes = [100, 1000, 10000, 100000]

    print("\nTernary Merkle Benchmark")
    print("-" * 50)

    for size in sizes:
        items = _items(size)

        t0 = time.perf_counter()
        tree = build(items, "sha256")
        build_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        proof = generate_proof(tree, items[-1])
        prove_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ok = verify_proof(proof, root_hash(tree))
        verify_ms = (time.perf_counter() - t0) * 1000

        print(f"{size:>7} items: build {build_ms:8.2f}ms  prove {prove_ms:7.2f}ms  "
              f"verify {verify_ms:5.2f}ms  {'OK' if ok else 'FAIL'}")


if __name__ == "__main__":
    manual_benchmark()
