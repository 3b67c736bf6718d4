"""Tests for the diagnostic types and rendering."""

from lightsql.diagnostics import Diagnostic, Level, Span, codes, max_level
from lightsql.diagnostics.render import diagnostic_to_dict, render_text


def test_diagnostic_code_display():
    assert str(codes.UNTERMINATED_COMMENT) == "L0101"
    assert str(codes.UNKNOWN_METHOD) == "L0301"


def test_builder_api():
    diag = (
        Diagnostic.warning(codes.UNBALANCED_PARENTHESES, "1 unclosed '('")
        .span(Span(28, 29), "opened here")
        .note("subqueries inside an unclosed parenthesis are not reported")
        .at_statement(0)
    )

    assert diag.level == Level.WARNING
    assert not diag.is_error
    assert len(diag.spans) == 1
    assert diag.spans[0].label == "opened here"
    assert len(diag.notes) == 1
    assert diag.statement == 0


def test_span_slice():
    sql = "SELECT 1 /* broken"
    span = Span(9, len(sql))
    assert span.slice(sql) == "/* broken"


def test_max_level():
    assert max_level([]) is None
    diags = [
        Diagnostic.info(codes.EMPTY_STATEMENT, "skipped"),
        Diagnostic.error(codes.UNKNOWN_METHOD, "unrecognized"),
    ]
    assert max_level(diags) == Level.ERROR


def test_render_text():
    sql = "SELECT 1 /* broken"
    diag = (
        Diagnostic.warning(codes.UNTERMINATED_COMMENT, "unterminated block comment")
        .span(Span(9, len(sql)), "comment runs to end of input")
        .note("everything after /* is ignored")
    )
    text = render_text([diag], sql)
    assert text.splitlines() == [
        "warning[L0101]: unterminated block comment",
        "  --> 9: '/* broken' comment runs to end of input",
        "  = note: everything after /* is ignored",
    ]


def test_render_text_statement_index():
    diag = Diagnostic.error(codes.UNKNOWN_METHOD, "unrecognized statement: WITH").at_statement(1)
    assert render_text([diag]) == "error[L0301]: unrecognized statement: WITH (statement 2)"


def test_diagnostic_to_dict():
    diag = Diagnostic.info(codes.EMPTY_STATEMENT, "2 empty statement(s) skipped")
    assert diagnostic_to_dict(diag) == {
        "level": "info",
        "code": "L0202",
        "message": "2 empty statement(s) skipped",
        "notes": [],
    }


def test_render_text_statement_span_uses_statement_text():
    sql = "/* long leading comment */ SELECT 1 FROM a; SELECT x) FROM t"
    statements = ["SELECT 1 FROM a", "SELECT x) FROM t"]
    diag = (
        Diagnostic.warning(codes.UNBALANCED_PARENTHESES, "unmatched ')'")
        .span(Span(8, 9), "no opening parenthesis")
        .at_statement(1)
    )
    assert render_text([diag], sql, statements).splitlines() == [
        "warning[L0201]: unmatched ')' (statement 2)",
        "  --> 8: ')' no opening parenthesis",
    ]


def test_render_text_statement_span_without_statements():
    diag = (
        Diagnostic.warning(codes.UNBALANCED_PARENTHESES, "unmatched ')'")
        .span(Span(8, 9), "no opening parenthesis")
        .at_statement(1)
    )
    text = render_text([diag], "/* long leading comment */ SELECT 1")
    assert text.splitlines()[1] == "  --> 8..9 no opening parenthesis"


def test_diagnostic_to_dict_names_span_source():
    query_diag = Diagnostic.warning(codes.UNBALANCED_QUOTE, "unbalanced ' quote").span(
        Span(3, 4), "no matching quote"
    )
    statement_diag = (
        Diagnostic.warning(codes.UNBALANCED_PARENTHESES, "unmatched ')'")
        .span(Span(8, 9), "no opening parenthesis")
        .at_statement(0)
    )
    assert diagnostic_to_dict(query_diag)["spans_in"] == "query"
    assert diagnostic_to_dict(statement_diag)["spans_in"] == "statement"
    assert diagnostic_to_dict(statement_diag)["statement"] == 0
