"""TriMerkle performance benchmarks.

Run all benchmarks:
    pytest benchmarks/bench_tree.py --benchmark-only

Generate JSON report:
    pytest benchmarks/bench_tree.py --benchmark-only --benchmark-json=results.json
"""
