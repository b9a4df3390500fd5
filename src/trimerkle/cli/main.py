"""TriMerkle CLI entry point - assembles all command groups."""
import click

from trimerkle import __version__

from .tree_cmd import tree


@click.group()
@click.version_option(version=__version__)
def cli():
    """TriMerkle: ternary Merkle trees and membership proofs."""
    pass


cli.add_command(tree)


if __name__ == "__main__":
    cli()
