"""Errors raised by the tool data layer."""

from __future__ import annotations


class ToolInventoryError(Exception):
    """Base class for data layer failures shown to the user."""


class UnsupportedAddressError(ToolInventoryError, ValueError):
    """URI is neither the tool collection nor a single tool."""


class ToolValidationError(ToolInventoryError, ValueError):
    """A field map broke one of the tool rules. `field` names the offending column."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class StorageError(ToolInventoryError, RuntimeError):
    """SQLite rejected a statement."""
