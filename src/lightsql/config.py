"""Scanner configuration — ~/.lightsql/config.toml."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from lightsql.scan.tables import DEFAULT_JOIN_KEYWORDS

logger = logging.getLogger(__name__)

CONFIG_ENV = "LIGHTSQL_CONFIG"
_CONFIG_FILE = Path.home() / ".lightsql" / "config.toml"


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be used."""


@dataclass(frozen=True)
class ScanConfig:
    join_keywords: tuple[str, ...] = DEFAULT_JOIN_KEYWORDS
    strip_line_comments: bool = False


def _config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return _CONFIG_FILE


def _parse_join_keywords(value: object) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError("scan.join_keywords must be a list of strings")
    keywords = tuple(" ".join(v.upper().split()) for v in value if v.strip())
    if not keywords:
        raise ConfigError("scan.join_keywords must not be empty")
    if not all(k.endswith("JOIN") for k in keywords):
        raise ConfigError("every entry in scan.join_keywords must end with JOIN")
    return keywords


def config_from_dict(data: dict) -> ScanConfig:
    """Build a ScanConfig from the parsed ``[scan]`` table."""
    unknown = set(data) - {"join_keywords", "strip_line_comments"}
    if unknown:
        raise ConfigError(f"unknown scan option(s): {', '.join(sorted(unknown))}")

    kwargs: dict = {}
    if "join_keywords" in data:
        kwargs["join_keywords"] = _parse_join_keywords(data["join_keywords"])
    if "strip_line_comments" in data:
        if not isinstance(data["strip_line_comments"], bool):
            raise ConfigError("scan.strip_line_comments must be true or false")
        kwargs["strip_line_comments"] = data["strip_line_comments"]
    return ScanConfig(**kwargs)


def load_config(path: str | Path | None = None) -> ScanConfig:
    """Load the scanner config.

    Lookup order: ``path``, then ``$LIGHTSQL_CONFIG``, then
    ``~/.lightsql/config.toml``. A missing file yields the defaults; a file
    that is not valid TOML or holds bad values raises ConfigError.
    """
    config_file = _config_path(path)
    if not config_file.exists():
        logger.debug("no config at %s, using defaults", config_file)
        return ScanConfig()

    try:
        data = tomllib.loads(config_file.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_file}: {e}") from e

    scan = data.get("scan", {})
    if not isinstance(scan, dict):
        raise ConfigError(f"{config_file}: [scan] must be a table")

    config = config_from_dict(scan)
    logger.debug("loaded config from %s: %s", config_file, config)
    return config
