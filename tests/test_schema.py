"""Unit tests for the tools database (table creation, version, helper handles)."""

import sqlite3
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tool_inventory.db.contract import ALL_COLUMNS, TABLE_NAME
from tool_inventory.db.schema import (
    DATABASE_VERSION,
    ToolDbHelper,
    create_schema,
    get_db_path,
    get_schema_version,
    init_database,
)


def test_create_schema_columns() -> None:
    conn = sqlite3.connect(":memory:")
    create_schema(conn)
    create_schema(conn)
    info = conn.execute(f"PRAGMA table_info({TABLE_NAME})").fetchall()
    names = [r[1] for r in info]
    assert tuple(names) == ALL_COLUMNS
    types = {r[1]: r[2] for r in info}
    assert types["price"] == "REAL"
    assert types["quantity"] == "INTEGER"
    not_null = {r[1] for r in info if r[3]}
    assert not_null == {"name", "price", "supplier_name", "supplier_phone"}
    conn.close()


def test_helper_creates_table_on_first_access(tmp_path) -> None:
    path = tmp_path / "inventory.db"
    with ToolDbHelper(path) as helper:
        assert not path.exists()
        db = helper.get_writable_database()
        assert helper.get_readable_database() is db
        assert get_schema_version(db) == DATABASE_VERSION
        tables = [r[0] for r in db.execute("SELECT name FROM sqlite_master WHERE type = 'table'")]
        assert TABLE_NAME in tables
    assert path.exists()


def test_reopen_keeps_rows(tmp_path) -> None:
    path = tmp_path / "inventory.db"
    conn = init_database(path)
    conn.execute(
        f"INSERT INTO {TABLE_NAME} (name, price, quantity, supplier_name, supplier_phone) VALUES (?, ?, ?, ?, ?)",
        ("Saw", 12.5, 3, "Supplier_B", "555"),
    )
    conn.commit()
    conn.close()
    conn = init_database(path)
    row = conn.execute(f"SELECT name, price FROM {TABLE_NAME}").fetchone()
    assert (row["name"], row["price"]) == ("Saw", 12.5)
    conn.close()


def test_db_path_follows_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TOOL_INVENTORY_DATA", str(tmp_path / "data"))
    assert get_db_path() == tmp_path / "data" / "inventory.db"
    assert (tmp_path / "data").is_dir()
