from .contract import (
    CONTENT_AUTHORITY,
    BASE_CONTENT_URI,
    PATH_TOOLS,
    CONTENT_URI,
    CONTENT_LIST_TYPE,
    CONTENT_ITEM_TYPE,
    TABLE_NAME,
    ID,
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    COLUMN_SUPPLIER_NAME,
    COLUMN_SUPPLIER_PHONE,
    ALL_COLUMNS,
    Address,
    AddressTable,
    Collection,
    Item,
    DEFAULT_ADDRESS_TABLE,
    with_appended_id,
    parse_id,
)
from .errors import ToolInventoryError, UnsupportedAddressError, ToolValidationError, StorageError
from .schema import get_data_dir, get_db_path, create_schema, init_database, ToolDbHelper, DATABASE_VERSION
from .notifications import ChangeNotifier
from .tool_provider import ToolProvider, RowSet, validate_tool_values

__all__ = [
    "CONTENT_AUTHORITY",
    "BASE_CONTENT_URI",
    "PATH_TOOLS",
    "CONTENT_URI",
    "CONTENT_LIST_TYPE",
    "CONTENT_ITEM_TYPE",
    "TABLE_NAME",
    "ID",
    "COLUMN_TOOL_NAME",
    "COLUMN_TOOL_PRICE",
    "COLUMN_TOOL_QUANTITY",
    "COLUMN_SUPPLIER_NAME",
    "COLUMN_SUPPLIER_PHONE",
    "ALL_COLUMNS",
    "Address",
    "AddressTable",
    "Collection",
    "Item",
    "DEFAULT_ADDRESS_TABLE",
    "with_appended_id",
    "parse_id",
    "ToolInventoryError",
    "UnsupportedAddressError",
    "ToolValidationError",
    "StorageError",
    "get_data_dir",
    "get_db_path",
    "create_schema",
    "init_database",
    "ToolDbHelper",
    "DATABASE_VERSION",
    "ChangeNotifier",
    "ToolProvider",
    "RowSet",
    "validate_tool_values",
]
