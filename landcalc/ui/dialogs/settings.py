from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QGroupBox, QHBoxLayout, QComboBox, QLabel,
    QDialogButtonBox, QSpinBox
)
from PyQt6.QtCore import pyqtSignal

from landcalc.config import NUMBER_SYSTEMS, PRECISION_RANGE, THEMES
from landcalc.core.formatter import FormatSettings, format_number
from landcalc.core.managers import settings

PREVIEW_VALUE = 12345678.9


class SettingsDialog(QDialog):
    settings_changed = pyqtSignal(dict)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._load()

    def _setup_ui(self):
        self.setWindowTitle("Settings")
        self.setMinimumSize(380, 300)
        layout = QVBoxLayout(self)

        # number format
        ng = QGroupBox("Number Format")
        nl = QVBoxLayout()
        row = QHBoxLayout()
        self.combo_system = QComboBox()
        for key, label in NUMBER_SYSTEMS.items():
            self.combo_system.addItem(label, key)
        row.addWidget(QLabel("Number system:"))
        row.addWidget(self.combo_system)
        nl.addLayout(row)

        row = QHBoxLayout()
        self.spin_precision = QSpinBox()
        self.spin_precision.setRange(*PRECISION_RANGE)
        row.addWidget(QLabel("Decimal places:"))
        row.addWidget(self.spin_precision)
        row.addStretch()
        nl.addLayout(row)

        self.label_preview = QLabel()
        self.label_preview.setObjectName("hintLabel")
        nl.addWidget(self.label_preview)
        ng.setLayout(nl)
        layout.addWidget(ng)

        # theme
        tg = QGroupBox("Theme")
        tl = QHBoxLayout()
        self.combo_theme = QComboBox()
        self.combo_theme.addItems(THEMES)
        tl.addWidget(QLabel("Theme:"))
        tl.addWidget(self.combo_theme)
        tl.addStretch()
        tg.setLayout(tl)
        layout.addWidget(tg)

        layout.addStretch()

        self.combo_system.currentIndexChanged.connect(self._update_preview)
        self.spin_precision.valueChanged.connect(self._update_preview)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self._save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _load(self):
        fmt = settings.format_settings()
        index = self.combo_system.findData(fmt.number_system)
        self.combo_system.setCurrentIndex(max(index, 0))
        self.spin_precision.setValue(fmt.precision)
        self.combo_theme.setCurrentText(settings.get("theme", "light"))
        self._update_preview()

    def current_format_settings(self):
        return FormatSettings.coerce(self.combo_system.currentData(), self.spin_precision.value())

    def _update_preview(self, *_):
        preview = format_number(PREVIEW_VALUE, self.current_format_settings())
        self.label_preview.setText(f"Example: {PREVIEW_VALUE:,.1f} → {preview}")

    def _save(self):
        fmt = self.current_format_settings()
        new = {
            "number_system": fmt.number_system,
            "precision": fmt.precision,
            "theme": self.combo_theme.currentText(),
        }
        settings.update(new)
        self.settings_changed.emit(new)
        self.accept()
