"""
ToolProvider: routes a content URI to SQL on the tools table.
Validates field maps before any write and notifies observers after every write that changed rows.
"""

from __future__ import annotations

import logging
import math
import sqlite3
from typing import Any, Callable, Iterator, Mapping, Sequence

from .contract import (
    ALL_COLUMNS,
    COLUMN_SUPPLIER_NAME,
    COLUMN_SUPPLIER_PHONE,
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    CONTENT_ITEM_TYPE,
    CONTENT_LIST_TYPE,
    DEFAULT_ADDRESS_TABLE,
    ID,
    TABLE_NAME,
    WRITABLE_COLUMNS,
    Address,
    AddressTable,
    Collection,
    Item,
    with_appended_id,
)
from .errors import StorageError, ToolValidationError, UnsupportedAddressError
from .notifications import ChangeNotifier, ChangeObserver
from .schema import ToolDbHelper

log = logging.getLogger(__name__)

_ID_SELECTION = f"{ID} = ?"

# SQLite INTEGER is a signed 64-bit value
MAX_QUANTITY = 2**63 - 1


def _as_price(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(value)
    price = float(value)
    if math.isnan(price):
        raise ValueError(value)
    return price


def _as_quantity(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(value)
    quantity = int(value)
    if quantity > MAX_QUANTITY:
        raise ValueError(value)
    return quantity


def validate_tool_values(values: Mapping[str, Any]) -> dict[str, Any]:
    """
    Check a field map against the tool rules, in order, and stop at the first violation:
    name present, price >= 0 if given, quantity >= 0 if given, supplier name present,
    supplier phone present, no unknown columns.
    Returns a copy with price as float and quantity as int.
    """
    if values.get(COLUMN_TOOL_NAME) is None:
        raise ToolValidationError("Tool requires a name", COLUMN_TOOL_NAME)

    try:
        price = _as_price(values.get(COLUMN_TOOL_PRICE))
    except (TypeError, ValueError, OverflowError):
        raise ToolValidationError("Tool requires valid price", COLUMN_TOOL_PRICE) from None
    if price is not None and price < 0:
        raise ToolValidationError("Tool requires valid price", COLUMN_TOOL_PRICE)

    try:
        quantity = _as_quantity(values.get(COLUMN_TOOL_QUANTITY))
    except (TypeError, ValueError, OverflowError):
        raise ToolValidationError("Tool requires valid quantity", COLUMN_TOOL_QUANTITY) from None
    if quantity is not None and quantity < 0:
        raise ToolValidationError("Tool requires valid quantity", COLUMN_TOOL_QUANTITY)

    if values.get(COLUMN_SUPPLIER_NAME) is None:
        raise ToolValidationError("Tool requires a valid supplier name", COLUMN_SUPPLIER_NAME)
    if values.get(COLUMN_SUPPLIER_PHONE) is None:
        raise ToolValidationError("Tool requires a valid supplier phone number", COLUMN_SUPPLIER_PHONE)

    unknown = [k for k in values if k not in WRITABLE_COLUMNS]
    if unknown:
        raise ToolValidationError(f"Unknown tool column {unknown[0]!r}", unknown[0])

    out = dict(values)
    if COLUMN_TOOL_PRICE in out:
        out[COLUMN_TOOL_PRICE] = price
    if COLUMN_TOOL_QUANTITY in out:
        out[COLUMN_TOOL_QUANTITY] = quantity
    return out


class RowSet:
    """Result of a query: column names, rows, and the address observers can watch for staleness."""

    def __init__(
        self,
        columns: list[str],
        rows: list[sqlite3.Row],
        notification_address: Address,
        notifier: ChangeNotifier,
    ) -> None:
        self.columns = columns
        self.rows = rows
        self.notification_address = notification_address
        self._notifier = notifier
        self._unregister: list[Callable[[], None]] = []

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[sqlite3.Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> sqlite3.Row:
        return self.rows[index]

    def first(self) -> sqlite3.Row | None:
        return self.rows[0] if self.rows else None

    def register_observer(self, observer: ChangeObserver) -> None:
        """Call observer(uri) whenever data under this row set's address changes."""
        self._unregister.append(self._notifier.register(self.notification_address, observer))

    def close(self) -> None:
        """Drop all observers registered through this row set."""
        for unregister in self._unregister:
            unregister()
        self._unregister.clear()


class ToolProvider:
    """Query / insert / update / delete on the tools table, addressed by content URI."""

    def __init__(
        self,
        db_helper: ToolDbHelper,
        notifier: ChangeNotifier,
        addresses: AddressTable = DEFAULT_ADDRESS_TABLE,
    ) -> None:
        self._db_helper = db_helper
        self._notifier = notifier
        self._addresses = addresses

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    @property
    def content_uri(self) -> str:
        return self._addresses.content_uri

    def resolve(self, uri: str) -> Address:
        return self._addresses.resolve(uri)

    def _match(self, uri: str, message: str) -> Address:
        try:
            return self._addresses.resolve(uri)
        except UnsupportedAddressError:
            raise UnsupportedAddressError(f"{message} {uri}") from None

    def query(
        self,
        uri: str,
        projection: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        sort_order: str | None = None,
    ) -> RowSet:
        """
        Run a SELECT for uri. For a single tool the selection is replaced by `_id = ?`.
        projection defaults to all columns.
        """
        address = self._match(uri, "Cannot query unknown URI")
        if isinstance(address, Item):
            selection = _ID_SELECTION
            selection_args = (address.id,)

        columns = list(projection) if projection else list(ALL_COLUMNS)
        for col in columns:
            if col not in ALL_COLUMNS:
                raise ToolValidationError(f"Unknown tool column {col!r}", col)
        sql = f"SELECT {', '.join(columns)} FROM {TABLE_NAME}"
        if selection:
            sql += f" WHERE {selection}"
        if sort_order:
            sql += f" ORDER BY {sort_order}"

        db = self._db_helper.get_readable_database()
        try:
            rows = db.execute(sql, tuple(selection_args or ())).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Query failed for {uri}: {e}") from e
        return RowSet(columns, rows, address, self._notifier)

    def insert(self, uri: str, values: Mapping[str, Any]) -> str | None:
        """
        Insert a tool into the collection. Returns the new tool's URI (uri + new id),
        or None when SQLite produced no row.
        """
        address = self._match(uri, "Insertion is not supported for")
        if not isinstance(address, Collection):
            raise UnsupportedAddressError(f"Insertion is not supported for {uri}")
        clean = validate_tool_values(values)

        columns = list(clean)
        sql = (
            f"INSERT INTO {TABLE_NAME} ({', '.join(columns)}) "
            f"VALUES ({', '.join('?' for _ in columns)})"
        )
        db = self._db_helper.get_writable_database()
        try:
            cur = db.execute(sql, [clean[c] for c in columns])
            db.commit()
        except sqlite3.Error as e:
            db.rollback()
            log.error(f"Failed to insert row for {uri}: {e}")
            return None
        row_id = cur.lastrowid
        if not row_id:
            log.error(f"Failed to insert row for {uri}: no row id")
            return None

        log.debug(f"Inserted tool {row_id}")
        self._notifier.notify_change(address, uri)
        return with_appended_id(uri, row_id)

    def update(
        self,
        uri: str,
        values: Mapping[str, Any],
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        """
        Update the tools matched by uri (and selection, for the collection). Returns rows updated.
        An empty field map updates nothing. Validation uses the same rules as insert, so name,
        supplier name and supplier phone must be present even when only price or quantity changes.
        """
        address = self._match(uri, "Update is not supported for")
        if isinstance(address, Item):
            selection = _ID_SELECTION
            selection_args = (address.id,)
        if not values:
            return 0
        clean = validate_tool_values(values)

        columns = list(clean)
        sql = f"UPDATE {TABLE_NAME} SET {', '.join(f'{c} = ?' for c in columns)}"
        if selection:
            sql += f" WHERE {selection}"
        args = [clean[c] for c in columns] + list(selection_args or ())
        db = self._db_helper.get_writable_database()
        try:
            rows_updated = db.execute(sql, args).rowcount
            db.commit()
        except sqlite3.Error as e:
            db.rollback()
            raise StorageError(f"Update failed for {uri}: {e}") from e

        log.debug(f"Updated {rows_updated} tool(s) for {uri}")
        if rows_updated != 0:
            self._notifier.notify_change(address, uri)
        return rows_updated

    def delete(
        self,
        uri: str,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        """
        Delete the tools matched by uri. For the collection, selection applies as given
        (None deletes every tool); for a single tool the selection is replaced by `_id = ?`.
        Returns rows deleted.
        """
        address = self._match(uri, "Deletion is not supported for")
        if isinstance(address, Item):
            selection = _ID_SELECTION
            selection_args = (address.id,)

        sql = f"DELETE FROM {TABLE_NAME}"
        if selection:
            sql += f" WHERE {selection}"
        db = self._db_helper.get_writable_database()
        try:
            rows_deleted = db.execute(sql, tuple(selection_args or ())).rowcount
            db.commit()
        except sqlite3.Error as e:
            db.rollback()
            raise StorageError(f"Delete failed for {uri}: {e}") from e

        log.debug(f"Deleted {rows_deleted} tool(s) for {uri}")
        if rows_deleted != 0:
            self._notifier.notify_change(address, uri)
        return rows_deleted

    def get_type(self, uri: str) -> str:
        """Return the list type for the collection, the item type for a single tool."""
        address = self._match(uri, "Unknown URI")
        if isinstance(address, Item):
            return CONTENT_ITEM_TYPE
        return CONTENT_LIST_TYPE
