"""Applying a SQL schema file to a database in one transaction."""

from __future__ import annotations

import argparse
import os
import sqlite3
from typing import Any

DEFAULT_SQL_FILE = "database.sql"


def split_statements(sql_text: str) -> list[str]:
    """Split SQL text on semicolons, dropping blank statements."""
    return [part.strip() for part in sql_text.split(";") if part.strip()]


def migrate(connection: Any, sql_text: str) -> int:
    """Run every statement, rolling back on the first failure; return the count."""
    statements = split_statements(sql_text)
    cursor = connection.cursor()
    try:
        for statement in statements:
            cursor.execute(statement)
    except Exception:
        connection.rollback()
        raise
    finally:
        cursor.close()
    connection.commit()
    return len(statements)


def run_migration_file(connection: Any, path: str | os.PathLike[str]) -> int:
    """Run the statements of a SQL file."""
    with open(path, encoding="utf-8") as handle:
        return migrate(connection, handle.read())


def main(argv: list[str] | None = None) -> int:
    """Apply the schema file to an SQLite database."""
    parser = argparse.ArgumentParser(prog="migrate", description="migrate database")
    parser.add_argument("database", help="path of the SQLite database")
    parser.add_argument(
        "--file",
        default=os.path.join(os.getcwd(), DEFAULT_SQL_FILE),
        help="SQL file to apply",
    )
    args = parser.parse_args(argv)
    connection = sqlite3.connect(args.database)
    try:
        run_migration_file(connection, args.file)
    finally:
        connection.close()
    return 0