"""lightsql: shallow metadata extraction from raw SQL text."""

from lightsql.config import ConfigError, ScanConfig, load_config
from lightsql.parser import LightSQLParser, QueryReport

__all__ = [
    "ConfigError",
    "LightSQLParser",
    "QueryReport",
    "ScanConfig",
    "load_config",
]
