"""Test structural checks."""

from lightsql.diagnostics import Level, codes
from lightsql.scan._types import Method, TableRefs
from lightsql.scan.checks import (
    check_empty_statements,
    check_missing_table,
    check_unbalanced_parentheses,
    check_unbalanced_quotes,
    check_unknown_method,
    check_unterminated_comment,
)


class TestUnterminatedComment:
    def test_flags_open_comment(self) -> None:
        diag = check_unterminated_comment("SELECT 1 /* broken")
        assert diag is not None
        assert diag.code == codes.UNTERMINATED_COMMENT
        assert diag.level == Level.WARNING
        assert diag.spans[0].span.start == 9

    def test_closed_comment_ok(self) -> None:
        assert check_unterminated_comment("/* ok */ SELECT 1") is None


class TestUnbalancedQuotes:
    def test_flags_odd_quote(self) -> None:
        diag = check_unbalanced_quotes("SELECT * FROM t WHERE name = 'abc")
        assert diag is not None
        assert diag.code == codes.UNBALANCED_QUOTE

    def test_paired_quotes_ok(self) -> None:
        assert check_unbalanced_quotes("SELECT * FROM `t` WHERE a = 'x' AND b = \"y\"") is None

    def test_quote_inside_comment_ignored(self) -> None:
        assert check_unbalanced_quotes("/* don't */ SELECT * FROM t") is None

    def test_quote_inside_unterminated_comment_ignored(self) -> None:
        assert check_unbalanced_quotes("SELECT * FROM t /* it's broken") is None

    def test_span_points_at_raw_query(self) -> None:
        sql = "/* don't */ SELECT * FROM t WHERE a = 'x"
        diag = check_unbalanced_quotes(sql)
        assert diag is not None
        assert diag.spans[0].span.start == len(sql) - 2


class TestUnbalancedParentheses:
    def test_unclosed(self) -> None:
        diag = check_unbalanced_parentheses("SELECT * FROM t WHERE id IN (SELECT a FROM b")
        assert diag is not None
        assert diag.code == codes.UNBALANCED_PARENTHESES
        assert "1 unclosed" in diag.message

    def test_unopened(self) -> None:
        diag = check_unbalanced_parentheses("SELECT a) FROM t")
        assert diag is not None
        assert diag.spans[0].span.start == 8

    def test_balanced(self) -> None:
        assert check_unbalanced_parentheses("SELECT COUNT(*) FROM t") is None


def test_empty_statements_reported_as_info():
    diag = check_empty_statements("SELECT 1;;; SELECT 2")
    assert diag is not None
    assert diag.level == Level.INFO
    assert diag.code == codes.EMPTY_STATEMENT
    assert check_empty_statements("SELECT 1;") is None


def test_unknown_method_is_error():
    diag = check_unknown_method("WITH x AS (SELECT 1) SELECT * FROM x", Method.NONE)
    assert diag is not None
    assert diag.is_error
    assert "WITH" in diag.message
    assert check_unknown_method("SELECT 1", Method.SELECT) is None


def test_missing_table():
    diag = check_missing_table("SELECT 1", Method.SELECT, TableRefs())
    assert diag is not None
    assert diag.code == codes.NO_TABLE
    assert check_missing_table("SELECT * FROM t", Method.SELECT, TableRefs(primary="t")) is None
    # Unknown statements already get UNKNOWN_METHOD.
    assert check_missing_table("EXPLAIN x", Method.NONE, TableRefs()) is None
