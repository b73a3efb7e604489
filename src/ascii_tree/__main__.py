"""CLI entry point for ascii-tree."""

import logging
import sys

import click

from ascii_tree import RenderConfig, render_config
from ascii_tree.parsers import FORMATS


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--gap", "-g", "gap", type=int, default=1, help="Minimum blank columns between sibling subtrees")
@click.option("--format", "-f", "fmt", type=click.Choice(FORMATS), default=None, help="Input format (default: detect)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout details to stderr")
def main(input: str | None, gap: int, fmt: str | None, output: str | None, verbose: bool) -> None:
    """Outline or JSON tree to ASCII diagram output."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        rendered = render_config(text, RenderConfig(min_leaf_distance=gap, input_format=fmt))
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
