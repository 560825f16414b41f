"""
User preferences (window geometry, list sort order, log level). Stored as JSON alongside user data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..db.contract import ALL_COLUMNS, COLUMN_SUPPLIER_NAME, COLUMN_TOOL_NAME
from ..db.schema import get_data_dir

DEFAULT_SORT_COLUMN = COLUMN_TOOL_NAME
DEFAULT_LOG_LEVEL = "INFO"


def _preferences_path() -> Path:
    return get_data_dir() / "preferences.json"


def load_preferences() -> dict[str, Any]:
    """Load preferences from disk. Returns dict; missing file or invalid JSON => {}."""
    path = _preferences_path()
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            prefs = json.load(f)
    except (json.JSONDecodeError, OSError):
        return {}
    return prefs if isinstance(prefs, dict) else {}


def save_preferences(prefs: dict[str, Any]) -> None:
    """Save preferences to disk."""
    path = _preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(prefs, f, indent=2)


def get_window_geometry() -> str | None:
    """Main window geometry as base64 (Qt saveGeometry), or None."""
    v = load_preferences().get("window_geometry")
    return v if isinstance(v, str) and v else None


def set_window_geometry(geometry_b64: str) -> None:
    prefs = load_preferences()
    prefs["window_geometry"] = geometry_b64
    save_preferences(prefs)


def get_sort_order() -> tuple[str, bool]:
    """(column, descending) for the tool list. Unknown columns fall back to name ascending."""
    prefs = load_preferences()
    column = prefs.get("sort_column")
    if column not in ALL_COLUMNS:
        column = DEFAULT_SORT_COLUMN
    return column, bool(prefs.get("sort_descending", False))


def set_sort_order(column: str, descending: bool = False) -> None:
    if column not in ALL_COLUMNS:
        raise ValueError(f"Unknown tool column {column!r}")
    prefs = load_preferences()
    prefs["sort_column"] = column
    prefs["sort_descending"] = bool(descending)
    save_preferences(prefs)


def sort_order_clause() -> str:
    """ORDER BY clause for the stored sort order, e.g. 'name COLLATE NOCASE ASC'."""
    column, descending = get_sort_order()
    direction = "DESC" if descending else "ASC"
    if column in (COLUMN_TOOL_NAME, COLUMN_SUPPLIER_NAME):
        return f"{column} COLLATE NOCASE {direction}"
    return f"{column} {direction}"


def get_log_level() -> int:
    """Console log level from preferences ('DEBUG', 'INFO', ...). Invalid => INFO."""
    name = str(load_preferences().get("log_level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def set_log_level(name: str) -> None:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    prefs = load_preferences()
    prefs["log_level"] = name.upper()
    save_preferences(prefs)
