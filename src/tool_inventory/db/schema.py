"""
SQLite storage for Tool Inventory: one `tools` table in a local database file.
ToolDbHelper owns the connection, creates the table on first use and tracks the schema version.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path

from .contract import (
    TABLE_NAME,
    ID,
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    COLUMN_SUPPLIER_NAME,
    COLUMN_SUPPLIER_PHONE,
)

log = logging.getLogger(__name__)

DATABASE_NAME = "inventory.db"

# Bump when the schema changes and handle the step in on_upgrade().
DATABASE_VERSION = 1


def get_data_dir() -> Path:
    """Return the user data directory ($TOOL_INVENTORY_DATA or ~/.tool_inventory), creating it."""
    env = os.environ.get("TOOL_INVENTORY_DATA", "").strip()
    base = Path(env) if env else Path.home() / ".tool_inventory"
    base.mkdir(parents=True, exist_ok=True)
    return base


def get_db_path() -> Path:
    """Return path to the application SQLite database."""
    return get_data_dir() / DATABASE_NAME


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the tools table. Idempotent: uses IF NOT EXISTS."""
    conn.execute(f"""
        CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
            {ID} INTEGER PRIMARY KEY AUTOINCREMENT,
            {COLUMN_TOOL_NAME} TEXT NOT NULL,
            {COLUMN_TOOL_PRICE} REAL NOT NULL,
            {COLUMN_TOOL_QUANTITY} INTEGER,
            {COLUMN_SUPPLIER_NAME} TEXT NOT NULL,
            {COLUMN_SUPPLIER_PHONE} TEXT NOT NULL
        )
    """)
    conn.commit()


def get_schema_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version").fetchone()[0]


def on_upgrade(conn: sqlite3.Connection, old_version: int, new_version: int) -> None:
    """Migrate from old_version to new_version. The schema is still at version 1, so nothing to do."""


def _open(path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    version = get_schema_version(conn)
    if version == 0:
        log.info(f"Creating {TABLE_NAME} table in {path}")
        create_schema(conn)
    elif version < DATABASE_VERSION:
        log.info(f"Upgrading database {path} from version {version} to {DATABASE_VERSION}")
        on_upgrade(conn, version, DATABASE_VERSION)
    elif version > DATABASE_VERSION:
        log.warning(f"Database {path} is at version {version}, newer than {DATABASE_VERSION}")
    if version < DATABASE_VERSION:
        conn.execute(f"PRAGMA user_version = {DATABASE_VERSION}")
        conn.commit()
    return conn


class ToolDbHelper:
    """
    Owns the tools database. The file is opened (and the table created) on first access.
    Readable and writable handles are the same connection: one embedded file, default SQLite locking.
    """

    def __init__(self, db_path: Path | str | None = None) -> None:
        self._db_path = str(db_path) if db_path is not None else str(get_db_path())
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> str:
        return self._db_path

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = _open(self._db_path)
        return self._conn

    def get_readable_database(self) -> sqlite3.Connection:
        return self._connection()

    def get_writable_database(self) -> sqlite3.Connection:
        return self._connection()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> ToolDbHelper:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def init_database(db_path: Path | None = None) -> sqlite3.Connection:
    """
    Create or open the database at db_path (default: get_db_path()) and make sure the schema exists.
    Returns an open connection (caller is responsible for closing it).
    """
    path = db_path or get_db_path()
    return _open(str(path))
