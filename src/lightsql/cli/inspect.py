"""The `inspect` command: report statements, tables, fields and subqueries."""

from __future__ import annotations

import click

from lightsql.cli._output import format_report
from lightsql.cli._shared import resolve_config, resolve_sql_stdin
from lightsql.parser import LightSQLParser


@click.command("inspect")
@click.argument("sql", required=False, default=None)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (default: $LIGHTSQL_CONFIG or ~/.lightsql/config.toml).",
)
def inspect_cmd(
    sql: str | None,
    from_stdin: bool,
    output_format: str,
    config_path: str | None,
) -> None:
    """Extract shallow metadata from SQL without executing it."""
    text = resolve_sql_stdin(sql, from_stdin)
    parser = LightSQLParser(text, config=resolve_config(config_path))
    report = parser.report()
    click.echo(format_report(report, output_format=output_format))
    if report.has_errors:
        raise SystemExit(1)
