from __future__ import annotations

from farm_office.database.bootstrap import DEFAULT_SCHEMA_PATH, split_sql


def test_split_drops_database_selection_and_keeps_quoted_semicolons():
    sql = """
    CREATE DATABASE IF NOT EXISTS other;
    USE other;
    CREATE TABLE a (x VARCHAR(10) DEFAULT 'a;b');
    INSERT INTO a VALUES ('it\\'s; fine');
    """

    assert split_sql(sql) == [
        "CREATE TABLE a (x VARCHAR(10) DEFAULT 'a;b')",
        "INSERT INTO a VALUES ('it\\'s; fine')",
    ]


def test_bundled_schema_creates_every_table():
    statements = split_sql(DEFAULT_SCHEMA_PATH.read_text(encoding="utf-8"))

    assert len(statements) == 5
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
