"""CLI entry point for get-system-include-dirs."""

from __future__ import annotations

import logging
import sys

import click

from sysincludes.errors import IncludeDirsError
from sysincludes.resolver import get_include_dirs


@click.command(name="get-system-include-dirs")
@click.option(
    "-c",
    "--compiler",
    type=click.Path(),
    default=None,
    help="Path to the C++ compiler to query",
)
@click.option("--verbose", is_flag=True, help="Log discovery steps to stderr")
def main(compiler: str | None, verbose: bool):
    """Extract system include directories from C++ compiler."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        dirs = get_include_dirs(compiler)
    except IncludeDirsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for d in dirs:
        click.echo(d)


if __name__ == "__main__":
    main()
