from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


# The schema file names its own database; the configured DB_NAME wins.
_DB_SELECTION = re.compile(r"^\s*(?:CREATE\s+DATABASE|USE)\b.*?;\s*$", re.IGNORECASE | re.MULTILINE)


def split_sql(sql: str) -> list[str]:
    """Split a script into statements on ';' outside quoted strings."""
    sql = _DB_SELECTION.sub("", sql)
    statements: list[str] = []
    quote: Optional[str] = None
    start = 0
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            statements.append(sql[start:i])
            start = i + 1
        i += 1
    statements.append(sql[start:])
    return [s.strip() for s in statements if s.strip()]


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: Optional[str | Path] = None) -> None:
    ensure_database_exists(db_config)

    path = Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH
    statements = split_sql(path.read_text(encoding="utf-8"))

    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_admin_user(db_config: dict, *, login: str, password: str, name: str = "Administrador") -> bool:
    """Create the first Admin account if the login is not taken yet.

    Returns True when a new account was inserted.
    """
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT user_id FROM users WHERE login=%s", (login,))
        if cur.fetchone():
            return False
        cur.execute(
            "INSERT INTO users (name, login, password_hash, role) VALUES (%s, %s, %s, %s)",
            (name, login, generate_password_hash(password), Role.ADMIN.value),
        )
        conn.commit()
        logger.info("Created admin account %r", login)
        return True
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
