"""
Main window: tool list (name, price, quantity, supplier), add / sell / detail actions, File menu.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStackedWidget,
    QTableView,
    QLabel,
    QPushButton,
    QAbstractItemView,
    QHeaderView,
    QMessageBox,
    QApplication,
)
from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex, QByteArray

from ..db.contract import (
    ID,
    COLUMN_TOOL_NAME,
    COLUMN_TOOL_PRICE,
    COLUMN_TOOL_QUANTITY,
    COLUMN_SUPPLIER_NAME,
    with_appended_id,
)
from ..db.errors import ToolInventoryError
from ..db.tool_provider import RowSet, ToolProvider
from ..services.app_state import AppState
from ..services import preferences
from ..services.inventory import SAMPLE_TOOL, delete_all_tools, insert_sample_tool, sell_one
from .tool_fields import format_price, format_quantity

log = logging.getLogger(__name__)


def _restore_window_geometry(window: QMainWindow) -> None:
    """Restore main window size and position from preferences if available."""
    geom_b64 = preferences.get_window_geometry()
    if not geom_b64:
        return
    data = QByteArray.fromBase64(geom_b64.encode("utf-8"))
    if data.isEmpty():
        return
    window.restoreGeometry(data)


def _save_window_geometry(window: QMainWindow) -> None:
    """Persist main window size and position to preferences."""
    data = window.saveGeometry()
    if data.isEmpty():
        return
    preferences.set_window_geometry(data.toBase64().data().decode("utf-8"))


class ToolTableModel(QAbstractTableModel):
    """Table model over the tool collection. Re-queries whenever the provider reports a change."""

    # (header, column) pairs; column order matches the projection below
    COLUMNS = [
        ("Name", COLUMN_TOOL_NAME),
        ("Price", COLUMN_TOOL_PRICE),
        ("Quantity", COLUMN_TOOL_QUANTITY),
        ("Supplier", COLUMN_SUPPLIER_NAME),
    ]
    PROJECTION = [ID] + [c for _, c in COLUMNS]

    def __init__(self, provider: ToolProvider, parent=None) -> None:
        super().__init__(parent)
        self._provider = provider
        self._rows: Optional[RowSet] = None
        self._sort_order = preferences.sort_order_clause()

    def set_sort_column(self, section: int, descending: bool) -> None:
        if not 0 <= section < len(self.COLUMNS):
            return
        preferences.set_sort_order(self.COLUMNS[section][1], descending)
        self._sort_order = preferences.sort_order_clause()
        self.refresh()

    def refresh(self, changed_uri: str | None = None) -> None:
        self.beginResetModel()
        if self._rows is not None:
            self._rows.close()
        self._rows = self._provider.query(
            self._provider.content_uri,
            projection=self.PROJECTION,
            sort_order=self._sort_order,
        )
        self._rows.register_observer(self.refresh)
        self.endResetModel()

    def close(self) -> None:
        if self._rows is not None:
            self._rows.close()
            self._rows = None

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid() or self._rows is None:
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self.COLUMNS)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or self._rows is None or index.row() >= len(self._rows):
            return None
        row = self._rows[index.row()]
        column = self.COLUMNS[index.column()][1]
        if role == Qt.ItemDataRole.DisplayRole:
            value = row[column]
            if column == COLUMN_TOOL_PRICE:
                return format_price(value) or "—"
            if column == COLUMN_TOOL_QUANTITY:
                return format_quantity(value) or "0"
            return value
        if role == Qt.ItemDataRole.TextAlignmentRole and column in (COLUMN_TOOL_PRICE, COLUMN_TOOL_QUANTITY):
            return int(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole):
        if orientation == Qt.Orientation.Horizontal and role == Qt.ItemDataRole.DisplayRole and 0 <= section < len(self.COLUMNS):
            return self.COLUMNS[section][0]
        return None

    def tool_uri_at(self, row: int) -> Optional[str]:
        if self._rows is not None and 0 <= row < len(self._rows):
            return with_appended_id(self._provider.content_uri, self._rows[row][ID])
        return None


class MainWindow(QMainWindow):
    """Main application window: tool list, or an empty-state message when there are no tools."""

    def __init__(self, app_state: AppState) -> None:
        super().__init__()
        self.app_state = app_state
        self.setWindowTitle("Tool Inventory")
        self.setMinimumSize(600, 400)
        self.resize(800, 550)
        _restore_window_geometry(self)
        self._build_menu_bar()

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.model = ToolTableModel(app_state.provider, self)
        self.model.modelReset.connect(self._update_empty_state)
        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setAlternatingRowColors(True)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        header.setSectionsClickable(True)
        header.setSortIndicatorShown(True)
        column, descending = preferences.get_sort_order()
        sections = [c for _, c in ToolTableModel.COLUMNS]
        if column in sections:
            header.setSortIndicator(
                sections.index(column),
                Qt.SortOrder.DescendingOrder if descending else Qt.SortOrder.AscendingOrder,
            )
        header.sortIndicatorChanged.connect(self._on_sort_changed)
        self.table.activated.connect(self._on_row_activated)

        self.empty_view = QLabel("The inventory is empty.\nAdd a tool to get started.")
        self.empty_view.setObjectName("empty_view")
        self.empty_view.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.stacked = QStackedWidget()
        self.stacked.addWidget(self.table)
        self.stacked.addWidget(self.empty_view)
        layout.addWidget(self.stacked)

        btn_layout = QHBoxLayout()
        self.sale_btn = QPushButton("Sale")
        self.sale_btn.setToolTip("Sell one unit of the selected tool")
        self.sale_btn.clicked.connect(self._on_sale)
        detail_btn = QPushButton("Details")
        detail_btn.clicked.connect(self._on_details)
        add_btn = QPushButton("Add tool")
        add_btn.setObjectName("add_tool")
        add_btn.clicked.connect(self._on_add_tool)
        btn_layout.addWidget(self.sale_btn)
        btn_layout.addWidget(detail_btn)
        btn_layout.addStretch()
        btn_layout.addWidget(add_btn)
        layout.addLayout(btn_layout)

        self.model.refresh()

    def closeEvent(self, event) -> None:
        _save_window_geometry(self)
        self.model.close()
        super().closeEvent(event)

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()
        file_menu = menubar.addMenu("&File")
        file_menu.addAction("&Add tool", self._on_add_tool)
        file_menu.addAction("&Insert dummy data", self._on_insert_dummy_data)
        file_menu.addAction("&Delete all entries", self._on_delete_all)
        file_menu.addSeparator()
        file_menu.addAction("E&xit", QApplication.quit)
        help_menu = menubar.addMenu("&Help")
        help_menu.addAction("&About", self._on_about)

    def _update_empty_state(self) -> None:
        empty = self.model.rowCount() == 0
        self.stacked.setCurrentWidget(self.empty_view if empty else self.table)
        self.statusBar().showMessage(f"{self.model.rowCount()} tool(s)")

    def _selected_uri(self) -> Optional[str]:
        index = self.table.currentIndex()
        if not index.isValid():
            return None
        return self.model.tool_uri_at(index.row())

    def _on_sort_changed(self, section: int, order: Qt.SortOrder) -> None:
        self.model.set_sort_column(section, order == Qt.SortOrder.DescendingOrder)

    def _on_row_activated(self, index: QModelIndex) -> None:
        uri = self.model.tool_uri_at(index.row())
        if uri:
            self._open_detail(uri)

    def _on_details(self) -> None:
        uri = self._selected_uri()
        if uri:
            self._open_detail(uri)

    def _open_detail(self, uri: str) -> None:
        from .tool_detail import ToolDetailDialog

        ToolDetailDialog(self.app_state, uri, self).exec()

    def _on_add_tool(self) -> None:
        from .tool_editor import ToolEditorDialog

        ToolEditorDialog(self.app_state, None, self).exec()

    def _on_sale(self) -> None:
        uri = self._selected_uri()
        if not uri:
            self.statusBar().showMessage("Select a tool to sell.")
            return
        try:
            left = sell_one(self.app_state.provider, uri)
        except ToolInventoryError as e:
            log.warning(f"Sale failed for {uri}: {e}")
            QMessageBox.warning(self, "Sale failed", str(e))
            return
        if left is None:
            self.statusBar().showMessage("Tool no longer exists.")
        elif left == 0:
            self.statusBar().showMessage("Out of stock.")

    def _on_insert_dummy_data(self) -> None:
        try:
            uri = insert_sample_tool(self.app_state.provider)
        except ToolInventoryError as e:
            QMessageBox.critical(self, "Insert failed", str(e))
            return
        if uri is None:
            QMessageBox.critical(self, "Insert failed", f"Could not insert {SAMPLE_TOOL[COLUMN_TOOL_NAME]!r}.")

    def _on_delete_all(self) -> None:
        reply = QMessageBox.question(
            self,
            "Delete all entries",
            "Delete every tool in the inventory?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return
        try:
            delete_all_tools(self.app_state.provider)
        except ToolInventoryError as e:
            QMessageBox.critical(self, "Delete failed", str(e))

    def _on_about(self) -> None:
        QMessageBox.about(
            self,
            "About Tool Inventory",
            "Tool Inventory\n\nLocal inventory of tools, prices, stock and suppliers.",
        )


def run(argv: list[str] | None = None) -> int:
    """Start the application: logging, theme, database, main window."""
    from .theme import apply_theme
    from ..services.logging_config import setup_logging

    argv = list(sys.argv if argv is None else argv)
    setup_logging(console_level=preferences.get_log_level())
    app = QApplication(argv)
    app.setApplicationName("Tool Inventory")
    apply_theme(app)
    with AppState() as state:
        log.info(f"Opened database {state.db_path}")
        window = MainWindow(state)
        window.show()
        code = app.exec()
    log.info("Tool Inventory exited normally")
    return code
