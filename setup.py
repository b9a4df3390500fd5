"""TriMerkle setup - ternary Merkle trees with self-verifying proofs."""
from setuptools import setup, find_packages

setup(
    name="trimerkle",
    version="0.1.0",
    description="TriMerkle: ternary Merkle trees with self-verifying membership proofs",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-benchmark>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "trimerkle=trimerkle.cli.main:cli",
        ],
    },
)
