"""LightSQLParser: one query source plus the metadata derived from it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lightsql.config import ScanConfig
from lightsql.diagnostics import Diagnostic, Level, max_level
from lightsql.scan import (
    Method,
    TableRefs,
    classify,
    extract_fields,
    extract_subqueries,
    extract_tables,
    has_join,
    normalize,
    split_statements,
)
from lightsql.scan._scanner import unique
from lightsql.scan.checks import (
    check_empty_statements,
    check_missing_table,
    check_unbalanced_parentheses,
    check_unbalanced_quotes,
    check_unknown_method,
    check_unterminated_comment,
)

logger = logging.getLogger(__name__)


@dataclass
class _Statement:
    text: str
    method: Method
    tables: TableRefs


@dataclass
class QueryReport:
    """Everything the parser can tell about a query, in one value."""

    query: str
    statements: list[str]
    method: str
    table: str | None
    tables: list[str]
    join_tables: list[str]
    fields: list[str]
    subqueries: list[str]
    has_join: bool
    has_subquery: bool
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return max_level(self.diagnostics) == Level.ERROR


class LightSQLParser:
    """Shallow SQL metadata extractor.

    The parser owns a single query source. Normalized text, the statement
    list and per-statement analysis are computed on first access and cached
    until :meth:`set_query` replaces the source. Accessors never raise on
    malformed SQL; they return empty lists, ``""`` or ``None`` instead.

    Single-statement accessors (:meth:`get_method`, :meth:`get_table`,
    :meth:`get_fields`) look at the first statement; roll-ups
    (:meth:`get_all_tables`, :meth:`get_join_tables`,
    :meth:`get_subqueries`) span every statement.

    An instance is not safe to mutate from several threads at once; use one
    parser per thread.
    """

    def __init__(self, query: str = "", *, config: ScanConfig | None = None) -> None:
        self._config = config or ScanConfig()
        self._query = ""
        self.set_query(query)

    # -- Source -----------------------------------------------------------------

    def set_query(self, query: str) -> LightSQLParser:
        """Replace the query source and drop every derived result."""
        self._query = query
        self._normalized: str | None = None
        self._statements: list[_Statement] | None = None
        self._diagnostics: list[Diagnostic] | None = None
        return self

    def get_query(self) -> str:
        """The query exactly as last set."""
        return self._query

    @property
    def query(self) -> str:
        return self._query

    @property
    def config(self) -> ScanConfig:
        return self._config

    # -- Derived state ----------------------------------------------------------

    def get_normalized(self) -> str:
        """The query with comments and quote characters removed."""
        if self._normalized is None:
            self._normalized = normalize(
                self._query, strip_line_comments=self._config.strip_line_comments
            )
        return self._normalized

    def _analysis(self) -> list[_Statement]:
        if self._statements is None:
            join_keywords = self._config.join_keywords
            statements = []
            for text in split_statements(self.get_normalized()):
                method = classify(text)
                tables = extract_tables(text, method, join_keywords=join_keywords)
                statements.append(_Statement(text=text, method=method, tables=tables))
            logger.debug("split query into %d statement(s)", len(statements))
            self._statements = statements
        return self._statements

    def _first(self) -> _Statement | None:
        statements = self._analysis()
        return statements[0] if statements else None

    # -- Accessors --------------------------------------------------------------

    def get_all_queries(self) -> list[str]:
        """Every statement in order of appearance, normalized and trimmed."""
        return [s.text for s in self._analysis()]

    def get_method(self) -> str:
        """Command keyword of the first statement, or ``""``."""
        first = self._first()
        return first.method.value if first else ""

    def get_fields(self) -> list[str]:
        """Fields of the first statement, duplicates preserved."""
        first = self._first()
        if first is None:
            return []
        return extract_fields(first.text, first.method)

    def get_table(self) -> str | None:
        """Primary table of the first statement, or None."""
        first = self._first()
        return first.tables.primary if first else None

    def get_all_tables(self) -> list[str]:
        """Primary, FROM-list and joined tables of every statement, distinct."""
        return unique(t for s in self._analysis() for t in s.tables.all())

    def get_join_tables(self) -> list[str]:
        """Tables named after a join keyword in any statement, distinct."""
        return unique(t for s in self._analysis() for t in s.tables.joined)

    def has_join(self) -> bool:
        join_keywords = self._config.join_keywords
        return any(has_join(s.text, join_keywords=join_keywords) for s in self._analysis())

    def get_subqueries(self) -> list[str]:
        """Parenthesized SELECTs across every statement, distinct."""
        return unique(q for s in self._analysis() for q in extract_subqueries(s.text))

    def has_subquery(self) -> bool:
        return bool(self.get_subqueries())

    # -- Diagnostics ------------------------------------------------------------

    def get_diagnostics(self) -> list[Diagnostic]:
        """Problems the scanners worked around, as data rather than exceptions."""
        if self._diagnostics is None:
            diagnostics: list[Diagnostic] = []
            for check in (check_unterminated_comment, check_unbalanced_quotes):
                diag = check(self._query)
                if diag is not None:
                    diagnostics.append(diag)

            diag = check_empty_statements(self.get_normalized())
            if diag is not None:
                diagnostics.append(diag)

            for index, s in enumerate(self._analysis()):
                for diag in (
                    check_unbalanced_parentheses(s.text),
                    check_unknown_method(s.text, s.method),
                    check_missing_table(s.text, s.method, s.tables),
                ):
                    if diag is not None:
                        diagnostics.append(diag.at_statement(index))
            self._diagnostics = diagnostics
        return list(self._diagnostics)

    def report(self) -> QueryReport:
        return QueryReport(
            query=self._query,
            statements=self.get_all_queries(),
            method=self.get_method(),
            table=self.get_table(),
            tables=self.get_all_tables(),
            join_tables=self.get_join_tables(),
            fields=self.get_fields(),
            subqueries=self.get_subqueries(),
            has_join=self.has_join(),
            has_subquery=self.has_subquery(),
            diagnostics=self.get_diagnostics(),
        )
