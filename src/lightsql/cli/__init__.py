"""CLI entry point for the `lightsql` command."""

from __future__ import annotations

import logging

import click

from lightsql.cli.inspect import inspect_cmd
from lightsql.cli.split import split


@click.group()
@click.version_option(package_name="lightsql")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr.")
def main(verbose: bool) -> None:
    """lightsql: shallow metadata extraction from raw SQL."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


main.add_command(inspect_cmd)
main.add_command(split)
