"""
Inventory actions used by the UI: read one tool, sell one unit, sample data, delete everything.
All go through ToolProvider so observers are notified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..db.contract import (
    ID,
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    COLUMN_SUPPLIER_NAME,
    COLUMN_SUPPLIER_PHONE,
)
from ..db.tool_provider import ToolProvider

log = logging.getLogger(__name__)

# Hardcoded tool for "Insert dummy data".
SAMPLE_TOOL = {
    COLUMN_TOOL_NAME: "Ax",
    COLUMN_TOOL_PRICE: 19.84,
    COLUMN_TOOL_QUANTITY: 6,
    COLUMN_SUPPLIER_NAME: "Supplier_A",
    COLUMN_SUPPLIER_PHONE: "3313467...",
}


@dataclass
class ToolRecord:
    id: int
    name: str
    price: float | None
    quantity: int | None
    supplier_name: str
    supplier_phone: str

    def to_values(self) -> dict:
        """Field map for insert/update (no id)."""
        return {
            COLUMN_TOOL_NAME: self.name,
            COLUMN_TOOL_PRICE: self.price,
            COLUMN_TOOL_QUANTITY: self.quantity,
            COLUMN_SUPPLIER_NAME: self.supplier_name,
            COLUMN_SUPPLIER_PHONE: self.supplier_phone,
        }


def record_from_row(row) -> ToolRecord:
    return ToolRecord(
        id=row[ID],
        name=row[COLUMN_TOOL_NAME],
        price=row[COLUMN_TOOL_PRICE],
        quantity=row[COLUMN_TOOL_QUANTITY],
        supplier_name=row[COLUMN_SUPPLIER_NAME],
        supplier_phone=row[COLUMN_SUPPLIER_PHONE],
    )


def get_tool(provider: ToolProvider, uri: str) -> ToolRecord | None:
    """Return the tool at an item URI, or None if it no longer exists."""
    rows = provider.query(uri)
    row = rows.first()
    return record_from_row(row) if row is not None else None


def sell_one(provider: ToolProvider, uri: str) -> int | None:
    """
    Sell one unit of the tool at uri: quantity - 1, never below 0.
    Returns the new quantity, or None if the tool is gone.
    """
    tool = get_tool(provider, uri)
    if tool is None:
        return None
    current = tool.quantity or 0
    if current <= 0:
        return 0
    values = tool.to_values()
    values[COLUMN_TOOL_QUANTITY] = current - 1
    provider.update(uri, values)
    log.info(f"Sold one {tool.name!r} ({current - 1} left)")
    return current - 1


def insert_sample_tool(provider: ToolProvider) -> str | None:
    """Insert the sample Ax tool. Returns its URI."""
    return provider.insert(provider.content_uri, SAMPLE_TOOL)


def delete_all_tools(provider: ToolProvider) -> int:
    rows_deleted = provider.delete(provider.content_uri)
    log.info(f"Deleted all tools ({rows_deleted} rows)")
    return rows_deleted
