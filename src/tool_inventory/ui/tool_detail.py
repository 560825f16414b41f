"""
Tool detail: read-only view of one tool with Modify and Delete. Reloads when the tool changes.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QLabel,
    QPushButton,
    QMessageBox,
    QWidget,
)
from PySide6.QtCore import Qt

from ..db.contract import parse_id
from ..db.errors import ToolInventoryError
from ..db.tool_provider import RowSet
from ..services.app_state import AppState
from ..services.inventory import record_from_row
from .tool_fields import format_price, format_quantity


class ToolDetailDialog(QDialog):
    """Shows the tool at an item URI."""

    def __init__(self, app_state: AppState, uri: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.app_state = app_state
        self.uri = uri
        self._rows: RowSet | None = None
        self.setWindowTitle(f"Tool #{parse_id(uri)}")
        self.setMinimumWidth(360)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self.name_label = QLabel()
        self.price_label = QLabel()
        self.quantity_label = QLabel()
        self.supplier_name_label = QLabel()
        self.supplier_phone_label = QLabel()
        for label in (self.name_label, self.supplier_phone_label):
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        form.addRow("Name:", self.name_label)
        form.addRow("Price:", self.price_label)
        form.addRow("Quantity:", self.quantity_label)
        form.addRow("Supplier:", self.supplier_name_label)
        form.addRow("Supplier phone:", self.supplier_phone_label)
        layout.addLayout(form)

        btn_layout = QHBoxLayout()
        delete_btn = QPushButton("Delete")
        delete_btn.clicked.connect(self._delete)
        modify_btn = QPushButton("Modify")
        modify_btn.clicked.connect(self._modify)
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        btn_layout.addWidget(delete_btn)
        btn_layout.addStretch()
        btn_layout.addWidget(modify_btn)
        btn_layout.addWidget(close_btn)
        layout.addLayout(btn_layout)

        self.finished.connect(self._release)
        self._load_tool()

    def _load_tool(self, changed_uri: str | None = None) -> None:
        self._release()
        self._rows = self.app_state.provider.query(self.uri)
        self._rows.register_observer(self._load_tool)
        row = self._rows.first()
        if row is None:
            self.name_label.setText("(not found)")
            for label in (self.price_label, self.quantity_label, self.supplier_name_label, self.supplier_phone_label):
                label.setText("—")
            return
        tool = record_from_row(row)
        self.name_label.setText(tool.name)
        self.price_label.setText(format_price(tool.price) or "—")
        self.quantity_label.setText(format_quantity(tool.quantity) or "—")
        self.supplier_name_label.setText(tool.supplier_name)
        self.supplier_phone_label.setText(tool.supplier_phone)

    def _release(self, *args: object) -> None:
        if self._rows is not None:
            self._rows.close()
            self._rows = None

    def _modify(self) -> None:
        from .tool_editor import ToolEditorDialog

        ToolEditorDialog(self.app_state, self.uri, self).exec()
        if not self.app_state.provider.query(self.uri):
            self.accept()

    def _delete(self) -> None:
        reply = QMessageBox.question(
            self,
            "Delete tool",
            "Delete this tool?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return
        try:
            self.app_state.provider.delete(self.uri)
        except ToolInventoryError as e:
            QMessageBox.critical(self, "Delete failed", str(e))
            return
        self.accept()
