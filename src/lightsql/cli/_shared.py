"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys

import click

from lightsql.config import ConfigError, ScanConfig, load_config


def resolve_sql_stdin(sql: str | None, from_stdin: bool) -> str:
    """Resolve SQL from positional argument or stdin. Exactly one source required."""
    if sql and from_stdin:
        raise click.UsageError("Provide SQL as an argument or --from-stdin, not both.")
    if from_stdin:
        if sys.stdin.isatty():
            raise click.UsageError("--from-stdin requires piped input (stdin is a terminal).")
        return sys.stdin.read()
    if sql is None:
        raise click.UsageError("Missing argument 'SQL'. Provide SQL or use --from-stdin.")
    return sql


def resolve_config(path: str | None) -> ScanConfig:
    """Load the scan config, turning config problems into a clean CLI error."""
    try:
        return load_config(path)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="'--config'") from e
