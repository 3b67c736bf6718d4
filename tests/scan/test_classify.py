"""Test statement classification by leading keyword."""

import pytest

from lightsql.scan._types import Method
from lightsql.scan.classify import classify


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("SELECT * FROM users", Method.SELECT),
        ("   SELECT * FROM users   ", Method.SELECT),
        ("SeLeCt * FrOm users", Method.SELECT),
        ("SELECT\n\t*\nFROM\n\tusers", Method.SELECT),
        ("INSERT INTO users (name) VALUES (x)", Method.INSERT),
        ("UPDATE users SET name = Jane WHERE id = 1", Method.UPDATE),
        ("DELETE FROM users WHERE id = 1", Method.DELETE),
        ("CREATE TABLE users (id INT)", Method.CREATE_TABLE),
        ("create   index idx_users_name ON users (name)", Method.CREATE_INDEX),
        ("DROP TABLE users", Method.DROP),
        ("ALTER TABLE users ADD COLUMN age INT", Method.ALTER),
        ("TRUNCATE TABLE users", Method.TRUNCATE),
        # Bare CREATE with anything else is not recognized
        ("CREATE VIEW v AS SELECT 1", Method.NONE),
        ("CREATE TABLEAU x", Method.NONE),
        # Anchored at the first token, whole words only
        ("SELECTED FROM t", Method.NONE),
        ("users select", Method.NONE),
        ("WITH x AS (SELECT 1) SELECT * FROM x", Method.NONE),
        ("(SELECT 1)", Method.NONE),
        ("", Method.NONE),
        ("   ", Method.NONE),
    ],
)
def test_classify(sql: str, expected: Method) -> None:
    assert classify(sql) == expected


def test_method_values():
    assert Method.NONE.value == ""
    assert Method.CREATE_TABLE.value == "CREATE TABLE"
