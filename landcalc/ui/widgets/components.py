from PyQt6.QtWidgets import QLineEdit, QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont

from landcalc.core.formatter import INDIAN, format_editable, format_number, parse_editable
from landcalc.ui.styles import get_token


class NumberLineEdit(QLineEdit):
    """Input field that keeps its digits grouped while typing.

    text() holds the grouped form, raw_text() the plain decimal string.
    """
    value_changed = pyqtSignal(str)

    def __init__(self, placeholder="", number_system=INDIAN, parent=None):
        super().__init__(parent)
        self._number_system = number_system
        self.setPlaceholderText(placeholder)
        self.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.textEdited.connect(self._on_edited)

    def raw_text(self):
        return parse_editable(self.text())

    def set_raw_text(self, raw):
        self.setText(format_editable(raw, self._number_system))
        self.value_changed.emit(self.raw_text())

    def set_number_system(self, number_system):
        self._number_system = number_system
        self.setText(format_editable(self.raw_text(), number_system))

    def _on_edited(self, text):
        # keep the cursor at the same position counted from the right, ignoring separators
        tail = parse_editable(text[self.cursorPosition():])
        formatted = format_editable(text, self._number_system)
        if formatted != text:
            self.setText(formatted)
            pos = len(formatted)
            kept = 0
            while pos > 0 and kept < len(tail):
                pos -= 1
                if formatted[pos] != ",":
                    kept += 1
            self.setCursorPosition(pos)
        self.value_changed.emit(self.raw_text())


class NumericTableWidgetItem(QTableWidgetItem):
    """Right-aligned cell showing abbreviated text, full value in the tooltip."""
    def __init__(self, text, value=None):
        super().__init__(text)
        self.value = value
        self.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        if value is not None:
            self.setToolTip(f"{value:,.6f}".rstrip("0").rstrip("."))


class ResultTable(QTableWidget):
    COLUMNS = ["Unit", "Area", "Price / Unit"]
    NO_PRICE = "-"
    SOURCE_MARK = "  • Original"

    def __init__(self, parent=None, theme="light"):
        super().__init__(parent)
        self._theme = theme
        self.setColumnCount(len(self.COLUMNS))
        self.setHorizontalHeaderLabels(self.COLUMNS)
        header = self.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.setAlternatingRowColors(True)

    def set_theme(self, theme):
        self._theme = theme

    def set_results(self, results, format_settings, show_price=True, currency=""):
        self.setRowCount(0)
        self.setColumnHidden(2, not show_price)
        self.setRowCount(len(results))
        for row, result in enumerate(results):
            name = result.display_name + (self.SOURCE_MARK if result.is_source_unit else "")
            unit_item = QTableWidgetItem(name)
            unit_item.setData(Qt.ItemDataRole.UserRole, result.unit_id)
            area_item = NumericTableWidgetItem(format_number(result.area, format_settings), result.area)
            if result.price_per_unit is None:
                price_item = NumericTableWidgetItem(self.NO_PRICE)
            else:
                price_item = NumericTableWidgetItem(
                    currency + format_number(result.price_per_unit, format_settings), result.price_per_unit
                )
            items = (unit_item, area_item, price_item)
            if result.is_source_unit:
                self._highlight(items)
            for col, item in enumerate(items):
                self.setItem(row, col, item)

    def _highlight(self, items):
        bg = QColor(get_token(self._theme, "bg_source_row") or "#dbeafe")
        for item in items:
            item.setBackground(bg)
            font = QFont(item.font())
            font.setBold(True)
            item.setFont(font)

    def source_row(self):
        for row in range(self.rowCount()):
            item = self.item(row, 0)
            if item is not None and item.text().endswith(self.SOURCE_MARK):
                return row
        return -1

    def row_texts(self, row):
        return [self.item(row, col).text() if self.item(row, col) else "" for col in range(self.columnCount())]
