"""
Dark theme for the tool inventory window: in-code palette and QSS for PySide6.
"""

from PySide6.QtGui import QPalette, QColor
from PySide6.QtWidgets import QApplication

# --- Dark palette ---
COLOR_BACKGROUND = "#121417"
COLOR_SURFACE = "#1b1e23"
COLOR_SURFACE_VARIANT = "#23272e"
COLOR_OUTLINE = "#363c46"
COLOR_PRIMARY = "#e0902f"
COLOR_ON_PRIMARY = "#121417"
COLOR_ON_SURFACE = "#e6e6e1"
COLOR_TEXT_HEADER = "#f2c48d"
COLOR_TEXT_SECONDARY = "#9ea4ad"
COLOR_TEXT_DISABLED = "#5a606a"
COLOR_HIGHLIGHT = "#363c46"
COLOR_HIGHLIGHT_TEXT = "#e6e6e1"


def dark_palette() -> QPalette:
    """Build QPalette for dark theme."""
    p = QPalette()
    p.setColor(QPalette.ColorRole.Window, QColor(COLOR_BACKGROUND))
    p.setColor(QPalette.ColorRole.WindowText, QColor(COLOR_ON_SURFACE))
    p.setColor(QPalette.ColorRole.Base, QColor(COLOR_SURFACE))
    p.setColor(QPalette.ColorRole.AlternateBase, QColor(COLOR_SURFACE_VARIANT))
    p.setColor(QPalette.ColorRole.Text, QColor(COLOR_ON_SURFACE))
    p.setColor(QPalette.ColorRole.Button, QColor(COLOR_SURFACE))
    p.setColor(QPalette.ColorRole.ButtonText, QColor(COLOR_ON_SURFACE))
    p.setColor(QPalette.ColorRole.Highlight, QColor(COLOR_HIGHLIGHT))
    p.setColor(QPalette.ColorRole.HighlightedText, QColor(COLOR_HIGHLIGHT_TEXT))
    p.setColor(QPalette.ColorRole.PlaceholderText, QColor(COLOR_TEXT_DISABLED))
    return p


def dark_stylesheet() -> str:
    """QSS for main window, menus, buttons, the tool table and the editor inputs."""
    return f"""
        QMainWindow, QDialog, QWidget {{
            background-color: {COLOR_BACKGROUND};
            color: {COLOR_ON_SURFACE};
        }}
        QMenuBar {{
            background-color: {COLOR_SURFACE};
            color: {COLOR_TEXT_HEADER};
        }}
        QMenuBar::item:selected, QMenu::item:selected {{
            background-color: {COLOR_OUTLINE};
        }}
        QMenu {{
            background-color: {COLOR_SURFACE};
            color: {COLOR_ON_SURFACE};
        }}
        QPushButton {{
            background-color: {COLOR_SURFACE};
            color: {COLOR_ON_SURFACE};
            border: 1px solid {COLOR_OUTLINE};
            border-radius: 4px;
            padding: 4px 12px;
        }}
        QPushButton:hover {{
            border-color: {COLOR_PRIMARY};
        }}
        QPushButton#add_tool {{
            background-color: {COLOR_PRIMARY};
            color: {COLOR_ON_PRIMARY};
            font-weight: bold;
        }}
        QLineEdit {{
            background-color: {COLOR_SURFACE};
            color: {COLOR_ON_SURFACE};
            border: 1px solid {COLOR_OUTLINE};
            border-radius: 4px;
            padding: 2px;
        }}
        QLineEdit:read-only {{
            background-color: {COLOR_SURFACE_VARIANT};
            border-color: {COLOR_SURFACE_VARIANT};
        }}
        QTableView {{
            background-color: {COLOR_SURFACE};
            alternate-background-color: {COLOR_SURFACE_VARIANT};
            gridline-color: {COLOR_OUTLINE};
            border: 1px solid {COLOR_OUTLINE};
        }}
        QHeaderView::section {{
            background-color: {COLOR_SURFACE_VARIANT};
            color: {COLOR_TEXT_HEADER};
            border: none;
            padding: 4px;
        }}
        QLabel#empty_view {{
            color: {COLOR_TEXT_SECONDARY};
            font-size: 14pt;
        }}
        QStatusBar {{
            color: {COLOR_TEXT_SECONDARY};
        }}
    """


def apply_theme(app: QApplication) -> None:
    """Apply dark theme to the application."""
    app.setPalette(dark_palette())
    app.setStyleSheet(dark_stylesheet())
