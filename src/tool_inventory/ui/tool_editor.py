"""
Tool editor: create a new tool, or edit / delete an existing one addressed by its URI.
"""

from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QLineEdit,
    QPushButton,
    QMessageBox,
    QWidget,
)
from PySide6.QtGui import QDoubleValidator, QIntValidator

from ..db.errors import ToolInventoryError
from ..services.app_state import AppState
from ..services.inventory import get_tool
from .tool_fields import format_price, format_quantity, values_from_inputs

log = logging.getLogger(__name__)


class ToolEditorDialog(QDialog):
    """Create mode when uri is None, edit mode for an item URI."""

    def __init__(self, app_state: AppState, uri: str | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.app_state = app_state
        self.uri = uri
        self.setWindowTitle("Edit Tool" if uri else "Add a Tool")
        self.setMinimumWidth(380)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self.name_edit = QLineEdit()
        self.price_edit = QLineEdit()
        validator = QDoubleValidator(0.0, 1e9, 2, self.price_edit)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        self.price_edit.setValidator(validator)
        self.quantity_edit = QLineEdit()
        self.quantity_edit.setValidator(QIntValidator(0, 1_000_000, self.quantity_edit))
        self.supplier_name_edit = QLineEdit()
        self.supplier_phone_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Tool name")
        self.price_edit.setPlaceholderText("0.00")
        self.quantity_edit.setPlaceholderText("0")
        form.addRow("Name:", self.name_edit)
        form.addRow("Price:", self.price_edit)
        form.addRow("Quantity:", self.quantity_edit)
        form.addRow("Supplier:", self.supplier_name_edit)
        form.addRow("Supplier phone:", self.supplier_phone_edit)
        layout.addLayout(form)

        btn_layout = QHBoxLayout()
        if uri:
            delete_btn = QPushButton("Delete")
            delete_btn.clicked.connect(self._delete)
            btn_layout.addWidget(delete_btn)
        btn_layout.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save")
        save_btn.setDefault(True)
        save_btn.clicked.connect(self._save)
        btn_layout.addWidget(cancel_btn)
        btn_layout.addWidget(save_btn)
        layout.addLayout(btn_layout)

        if uri:
            self._load_tool()

    def _load_tool(self) -> None:
        tool = get_tool(self.app_state.provider, self.uri)
        if tool is None:
            return
        self.name_edit.setText(tool.name)
        self.price_edit.setText(format_price(tool.price))
        self.quantity_edit.setText(format_quantity(tool.quantity))
        self.supplier_name_edit.setText(tool.supplier_name)
        self.supplier_phone_edit.setText(tool.supplier_phone)

    def _save(self) -> None:
        provider = self.app_state.provider
        try:
            values = values_from_inputs(
                self.name_edit.text(),
                self.price_edit.text(),
                self.quantity_edit.text(),
                self.supplier_name_edit.text(),
                self.supplier_phone_edit.text(),
            )
            if self.uri is None:
                new_uri = provider.insert(provider.content_uri, values)
                if new_uri is None:
                    QMessageBox.critical(self, "Error", "Error with saving tool.")
                    return
            else:
                if provider.update(self.uri, values) == 0:
                    QMessageBox.warning(self, "Not saved", "The tool no longer exists.")
                    return
        except ToolInventoryError as e:
            log.warning(f"Tool not saved: {e}")
            QMessageBox.warning(self, "Invalid tool", str(e))
            return
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
