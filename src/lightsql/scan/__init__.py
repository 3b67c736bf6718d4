"""Lexical scanners: normalize, split, classify, extract."""

from lightsql.scan._types import Method, TableRefs
from lightsql.scan.classify import classify
from lightsql.scan.fields import extract_fields
from lightsql.scan.normalize import normalize
from lightsql.scan.split import split_statements
from lightsql.scan.subqueries import extract_subqueries
from lightsql.scan.tables import DEFAULT_JOIN_KEYWORDS, extract_tables, has_join

__all__ = [
    "DEFAULT_JOIN_KEYWORDS",
    "Method",
    "TableRefs",
    "classify",
    "extract_fields",
    "extract_subqueries",
    "extract_tables",
    "has_join",
    "normalize",
    "split_statements",
]
