"""Test field extraction."""

import pytest

from lightsql.scan._types import Method
from lightsql.scan.fields import extract_fields, strip_alias


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("SELECT * FROM users", ["*"]),
        ("SELECT id, name, email FROM users", ["id", "name", "email"]),
        (
            "SELECT u.name as user_name, u.email as user_email FROM users u",
            ["u.name", "u.email"],
        ),
        ("SELECT u.name user_name FROM users u", ["u.name"]),
        ("SELECT u.* FROM users u", ["u.*"]),
        ("SELECT DISTINCT city FROM users", ["city"]),
        ("SELECT COUNT(o.id) as order_count, a + b FROM t", ["COUNT(o.id)", "a + b"]),
        ("SELECT CASE WHEN a THEN 1 ELSE 0 END FROM t", ["CASE WHEN a THEN 1 ELSE 0 END"]),
        ("SELECT 1", ["1"]),
        ("SELECT EXTRACT(YEAR FROM d) AS y FROM t", ["EXTRACT(YEAR FROM d)"]),
    ],
)
def test_select_fields(sql: str, expected: list[str]) -> None:
    assert extract_fields(sql, Method.SELECT) == expected


def test_select_fields_keep_duplicates():
    # Unlike table and subquery roll-ups, fields are not deduplicated.
    assert extract_fields("SELECT name, email, name FROM users", Method.SELECT) == [
        "name",
        "email",
        "name",
    ]


def test_insert_column_list():
    sql = "INSERT INTO users (name, email) VALUES (John, john@example.com)"
    assert extract_fields(sql, Method.INSERT) == ["name", "email"]


def test_insert_set():
    sql = "INSERT INTO users SET name = John, email = john@example.com"
    assert extract_fields(sql, Method.INSERT) == ["name", "email"]


def test_insert_without_columns():
    assert extract_fields("INSERT INTO settings VALUES (1, 2)", Method.INSERT) == []


def test_update_set():
    sql = "UPDATE users SET name = Jane, email = jane@example.com WHERE id = 1"
    assert extract_fields(sql, Method.UPDATE) == ["name", "email"]


def test_delete_has_no_fields():
    assert extract_fields("DELETE FROM users WHERE id = 1", Method.DELETE) == []


def test_unknown_method_has_no_fields():
    assert extract_fields("EXPLAIN SELECT 1", Method.NONE) == []


@pytest.mark.parametrize(
    "entry,expected",
    [
        ("u.name AS user_name", "u.name"),
        ("CAST(x AS INT) AS y", "CAST(x AS INT)"),
        ("price * qty total", "price * qty"),
        ("a + b", "a + b"),
        ("x IS NULL", "x IS NULL"),
        ("a BETWEEN 1 AND b", "a BETWEEN 1 AND b"),
        ("COUNT (*)", "COUNT (*)"),
        ("name", "name"),
    ],
)
def test_strip_alias(entry: str, expected: str) -> None:
    assert strip_alias(entry) == expected
