"""Unit tests for editor form helpers."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tool_inventory.db.errors import ToolValidationError
from tool_inventory.ui.tool_fields import (
    format_price,
    format_quantity,
    parse_price,
    parse_quantity,
    values_from_inputs,
)


def test_parse_price() -> None:
    assert parse_price("19.84") == 19.84
    assert parse_price(" 19,84 ") == 19.84
    assert parse_price("") is None
    with pytest.raises(ToolValidationError):
        parse_price("cheap")


def test_parse_quantity() -> None:
    assert parse_quantity("6") == 6
    assert parse_quantity("  ") is None
    with pytest.raises(ToolValidationError):
        parse_quantity("6.5")


def test_values_from_inputs_blank_required_fields_are_none() -> None:
    values = values_from_inputs("  Ax ", "19.84", "", " ", "3313467...")
    assert values == {
        "name": "Ax",
        "price": 19.84,
        "quantity": None,
        "supplier_name": None,
        "supplier_phone": "3313467...",
    }


def test_formatting() -> None:
    assert format_price(19.84) == "19.84"
    assert format_price(None) == ""
    assert format_quantity(0) == "0"
    assert format_quantity(None) == ""
