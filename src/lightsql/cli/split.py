"""The `split` command: print each statement of a multi-statement query."""

from __future__ import annotations

import click

from lightsql.cli._output import format_statements
from lightsql.cli._shared import resolve_config, resolve_sql_stdin
from lightsql.parser import LightSQLParser


@click.command()
@click.argument("sql", required=False, default=None)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None)
def split(sql: str | None, from_stdin: bool, output_format: str, config_path: str | None) -> None:
    """Split SQL into normalized statements, one per line."""
    text = resolve_sql_stdin(sql, from_stdin)
    parser = LightSQLParser(text, config=resolve_config(config_path))
    output = format_statements(parser.get_all_queries(), output_format=output_format)
    if output:
        click.echo(output)
