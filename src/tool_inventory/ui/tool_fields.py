"""
Form helpers for the tool editor and list: text <-> field values. No Qt here, so it is testable on its own.
"""

from __future__ import annotations

from ..db.contract import (
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    COLUMN_SUPPLIER_NAME,
    COLUMN_SUPPLIER_PHONE,
)
from ..db.errors import ToolValidationError


def _text_or_none(text: str | None) -> str | None:
    text = (text or "").strip()
    return text or None


def parse_price(text: str | None) -> float | None:
    """'' => None; '19.84' or '19,84' => 19.84. Anything else raises ToolValidationError."""
    text = _text_or_none(text)
    if text is None:
        return None
    try:
        return float(text.replace(",", "."))
    except ValueError:
        raise ToolValidationError("Tool requires valid price", COLUMN_TOOL_PRICE) from None


def parse_quantity(text: str | None) -> int | None:
    """'' => None; whole numbers only."""
    text = _text_or_none(text)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        raise ToolValidationError("Tool requires valid quantity", COLUMN_TOOL_QUANTITY) from None


def values_from_inputs(
    name: str,
    price: str,
    quantity: str,
    supplier_name: str,
    supplier_phone: str,
) -> dict:
    """Field map from the editor's text boxes. Blank required text becomes None so the provider rejects it."""
    return {
        COLUMN_TOOL_NAME: _text_or_none(name),
        COLUMN_TOOL_PRICE: parse_price(price),
        COLUMN_TOOL_QUANTITY: parse_quantity(quantity),
        COLUMN_SUPPLIER_NAME: _text_or_none(supplier_name),
        COLUMN_SUPPLIER_PHONE: _text_or_none(supplier_phone),
    }


def format_price(price: float | None) -> str:
    return "" if price is None else f"{price:.2f}"


def format_quantity(quantity: int | None) -> str:
    return "" if quantity is None else str(quantity)
