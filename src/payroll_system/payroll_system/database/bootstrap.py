from __future__ import annotations

import logging
import re
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

DEMO_WORKERS = (
    # worker_id, name, employee_id, gender, base_salary, is_packer
    ("w-001", "Ravi Kumar", "EMP001", "male", Decimal("30000"), True),
    ("w-002", "Suresh Patel", "EMP002", "male", Decimal("26000"), False),
    ("w-003", "Anita Sharma", "EMP003", "female", Decimal("650"), True),
    ("w-004", "Meena Devi", "EMP004", "female", Decimal("600"), False),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes, skips -- comments).
    buf: list[str] = []
    in_single = False
    escape = False

    for line in sql.splitlines(keepends=True):
        if not in_single and line.lstrip().startswith("--"):
            continue
        for ch in line:
            if escape:
                buf.append(ch)
                escape = False
                continue
            if ch == "\\":
                buf.append(ch)
                escape = True
                continue
            if ch == "'":
                in_single = not in_single
            if ch == ";" and not in_single:
                stmt = "".join(buf).strip()
                buf.clear()
                if stmt:
                    yield stmt
                continue
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s", schema_path)


def ensure_demo_workers(db_config: dict) -> int:
    """Insert demo workers that are not present yet. Returns how many were added."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    added = 0
    try:
        cur = conn.cursor()
        for worker_id, name, employee_id, gender, base_salary, is_packer in DEMO_WORKERS:
            cur.execute("SELECT 1 FROM workers WHERE worker_id=%s", (worker_id,))
            if cur.fetchone():
                continue
            cur.execute(
                """
                INSERT INTO workers (worker_id, name, employee_id, gender, base_salary, is_packer)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (worker_id, name, employee_id, gender, base_salary, int(is_packer)),
            )
            added += 1
        conn.commit()
    finally:
        conn.close()
    logger.info("Seeded %d demo workers", added)
    return added


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
