import sqlite3

import pytest

from chatdesk.migrate import main, migrate, run_migration_file, split_statements


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT NOT NULL)")
    conn.commit()
    yield conn
    conn.close()


def test_split_statements_drops_blanks():
    assert split_statements("SELECT 1;  \n ;SELECT 2;") == ["SELECT 1", "SELECT 2"]


def test_split_statements_empty():
    assert split_statements("  ;\n;") == []


def test_migrate_runs_all(connection):
    count = migrate(
        connection,
        "INSERT INTO items (name) VALUES ('a');\nINSERT INTO items (name) VALUES ('b');\n",
    )
    assert count == 2
    rows = connection.execute("SELECT name FROM items ORDER BY id").fetchall()
    assert rows == [("a",), ("b",)]


def test_migrate_rolls_back_on_error(connection):
    with pytest.raises(sqlite3.DatabaseError):
        migrate(
            connection,
            "INSERT INTO items (name) VALUES ('a');INSERT INTO missing VALUES (1);",
        )
    assert connection.execute("SELECT COUNT(*) FROM items").fetchone() == (0,)


def test_run_migration_file(connection, tmp_path):
    sql_file = tmp_path / "database.sql"
    sql_file.write_text("INSERT INTO items (name) VALUES ('x');", encoding="utf-8")
    assert run_migration_file(connection, sql_file) == 1
    assert connection.execute("SELECT name FROM items").fetchall() == [("x",)]


def test_main_uses_database_sql_in_cwd(tmp_path, monkeypatch):
    (tmp_path / "database.sql").write_text(
        "CREATE TABLE t (v INTEGER);INSERT INTO t VALUES (7);", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    db_path = tmp_path / "app.db"
    assert main([str(db_path)]) == 0
    conn = sqlite3.connect(db_path)
    try:
        assert conn.execute("SELECT v FROM t").fetchall() == [(7,)]
    finally:
        conn.close()


def test_main_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "app.db"), "--file", str(tmp_path / "absent.sql")])