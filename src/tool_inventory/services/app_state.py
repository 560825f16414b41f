"""
App-wide state: database helper, change notifier and tool provider.
Single place for UI and services to obtain the provider.
"""

from __future__ import annotations

from pathlib import Path

from ..db.contract import DEFAULT_ADDRESS_TABLE, AddressTable
from ..db.notifications import ChangeNotifier
from ..db.schema import ToolDbHelper
from ..db.tool_provider import ToolProvider


class AppState:
    """Holds the tool provider and its database. Create at startup, close on exit."""

    def __init__(self, db_path: Path | str | None = None, addresses: AddressTable = DEFAULT_ADDRESS_TABLE) -> None:
        self._db_helper: ToolDbHelper | None = ToolDbHelper(db_path)
        self._db_path = self._db_helper.db_path
        self.notifier = ChangeNotifier()
        self._provider = ToolProvider(self._db_helper, self.notifier, addresses)

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def provider(self) -> ToolProvider:
        if self._db_helper is None:
            raise RuntimeError("Database connection is closed")
        return self._provider

    def close(self) -> None:
        if self._db_helper is not None:
            self._db_helper.close()
            self._db_helper = None

    def __enter__(self) -> AppState:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
