"""Unit tests for inventory actions (sell, sample data, delete all) over AppState."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tool_inventory.db.contract import CONTENT_URI, COLUMN_TOOL_QUANTITY
from tool_inventory.services.app_state import AppState
from tool_inventory.services.inventory import (
    SAMPLE_TOOL,
    delete_all_tools,
    get_tool,
    insert_sample_tool,
    record_from_row,
    sell_one,
)


@pytest.fixture
def state(tmp_path):
    with AppState(tmp_path / "inventory.db") as s:
        yield s


def test_sample_tool_round_trip(state) -> None:
    uri = insert_sample_tool(state.provider)
    tool = get_tool(state.provider, uri)
    assert tool is not None
    assert tool.name == "Ax"
    assert tool.price == pytest.approx(19.84)
    assert tool.quantity == 6
    assert tool.supplier_name == "Supplier_A"
    assert tool.supplier_phone == "3313467..."


def test_sell_one_decrements_and_stops_at_zero(state) -> None:
    uri = state.provider.insert(CONTENT_URI, {**SAMPLE_TOOL, COLUMN_TOOL_QUANTITY: 2})
    seen = []
    state.provider.query(CONTENT_URI).register_observer(seen.append)
    assert sell_one(state.provider, uri) == 1
    assert sell_one(state.provider, uri) == 0
    assert sell_one(state.provider, uri) == 0
    assert get_tool(state.provider, uri).quantity == 0
    assert seen == [uri, uri]


def test_sell_one_missing_tool(state) -> None:
    assert sell_one(state.provider, f"{CONTENT_URI}/77") is None


def test_delete_all_and_list(state) -> None:
    insert_sample_tool(state.provider)
    state.provider.insert(CONTENT_URI, {**SAMPLE_TOOL, "name": "Bench vise"})
    rows = state.provider.query(CONTENT_URI, sort_order="name")
    assert [record_from_row(r).name for r in rows] == ["Ax", "Bench vise"]
    assert delete_all_tools(state.provider) == 2
    assert len(state.provider.query(CONTENT_URI)) == 0


def test_closed_state_refuses_provider(tmp_path) -> None:
    state = AppState(tmp_path / "inventory.db")
    state.close()
    with pytest.raises(RuntimeError):
        state.provider
