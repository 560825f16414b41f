"""
Tool Inventory contract: table and column names, content URIs, type tags.
An address is either the whole tool collection or one tool by id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import UnsupportedAddressError

# Name for the whole data layer, similar to a domain name for a website.
CONTENT_AUTHORITY = "tool_inventory"
CONTENT_SCHEME = "content://"
BASE_CONTENT_URI = CONTENT_SCHEME + CONTENT_AUTHORITY

PATH_TOOLS = "tools"
CONTENT_URI = BASE_CONTENT_URI + "/" + PATH_TOOLS

# Type tags for a list of tools and for a single tool
CURSOR_DIR_BASE_TYPE = "vnd.cursor.dir"
CURSOR_ITEM_BASE_TYPE = "vnd.cursor.item"
CONTENT_LIST_TYPE = f"{CURSOR_DIR_BASE_TYPE}/{CONTENT_AUTHORITY}/{PATH_TOOLS}"
CONTENT_ITEM_TYPE = f"{CURSOR_ITEM_BASE_TYPE}/{CONTENT_AUTHORITY}/{PATH_TOOLS}"

# --- tools table ---
TABLE_NAME = "tools"
ID = "_id"
COLUMN_TOOL_NAME = "name"
COLUMN_TOOL_PRICE = "price"  # REAL
COLUMN_TOOL_QUANTITY = "quantity"  # INTEGER
COLUMN_SUPPLIER_NAME = "supplier_name"
COLUMN_SUPPLIER_PHONE = "supplier_phone"

WRITABLE_COLUMNS = (
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    COLUMN_SUPPLIER_NAME,
    COLUMN_SUPPLIER_PHONE,
)
ALL_COLUMNS = (ID,) + WRITABLE_COLUMNS


@dataclass(frozen=True)
class Collection:
    """All tools."""


@dataclass(frozen=True)
class Item:
    """Exactly one tool."""

    id: int


Address = Union[Collection, Item]


@dataclass(frozen=True)
class AddressTable:
    """
    Routing table for one authority: maps a URI to Collection or Item(id).
    Built once at startup and handed to the provider.
    """

    authority: str = CONTENT_AUTHORITY
    path: str = PATH_TOOLS

    @property
    def content_uri(self) -> str:
        return f"{CONTENT_SCHEME}{self.authority}/{self.path}"

    def _path_segments(self, uri: str) -> list[str] | None:
        if uri.startswith(CONTENT_SCHEME):
            rest = uri[len(CONTENT_SCHEME):]
            authority, _, path = rest.partition("/")
            if authority != self.authority:
                return None
        else:
            path = uri
        # one trailing slash is allowed; empty inner segments ("tools//5") are not
        if path.endswith("/"):
            path = path[:-1]
        segments = path.split("/")
        if "" in segments:
            return None
        return segments

    def resolve(self, uri: str) -> Address:
        """Resolve uri to an address; raise UnsupportedAddressError if it is neither form."""
        segments = self._path_segments(uri or "")
        if segments and segments[0] == self.path:
            if len(segments) == 1:
                return Collection()
            if len(segments) == 2 and segments[1].isascii() and segments[1].isdigit():
                return Item(int(segments[1]))
        raise UnsupportedAddressError(f"Unsupported URI {uri}")


DEFAULT_ADDRESS_TABLE = AddressTable()


def with_appended_id(uri: str, row_id: int) -> str:
    """Append a row id to a collection URI, e.g. content://tool_inventory/tools/3."""
    return f"{uri.rstrip('/')}/{int(row_id)}"


def parse_id(uri: str) -> int:
    """Return the trailing id of an item URI, or -1 when the last segment is not a number."""
    last = uri.rstrip("/").rsplit("/", 1)[-1]
    return int(last) if last.isascii() and last.isdigit() else -1
