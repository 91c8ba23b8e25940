from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel,
    QPushButton, QComboBox, QGroupBox, QFrame, QCheckBox
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QIcon, QKeySequence

from landcalc.config import APP_TITLE, APP_SUBTITLE, APP_ICON_PATH, CURRENCY_SYMBOL, NUMBER_SYSTEMS
from landcalc.core.engine import CalculationInput, compute
from landcalc.core.managers import settings
from landcalc.core.units import UNIT_DEFINITIONS, UNITS
from landcalc.utils.converters import NumberConverter
from landcalc.utils.logger import get_logger
from .styles import get_stylesheet
from .widgets import NumberLineEdit, ResultTable
from .dialogs import SettingsDialog, UnitReferenceDialog

logger = get_logger("App")


class LandCalculatorApp(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        if APP_ICON_PATH.exists():
            self.setWindowIcon(QIcon(str(APP_ICON_PATH)))

        # State
        self.format_settings = settings.format_settings()
        self.current_theme = settings.get("theme", "light")
        self.results = []

        self._init_ui()
        self.recalculate()

    def _init_ui(self):
        geometry = settings.get("window_geometry")
        if isinstance(geometry, list) and len(geometry) == 4:
            self.setGeometry(*geometry)
        else:
            self.resize(900, 720)
        self.setStyleSheet(get_stylesheet(self.current_theme))

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setSpacing(16)

        self._setup_menu()
        self._setup_header(main_layout)
        self._setup_inputs(main_layout)
        self._setup_results(main_layout)

        self.status_bar = self.statusBar()
        self.status_text = QLabel("Ready")
        self.status_text.setObjectName("statusLabel")
        self.status_bar.addWidget(self.status_text)
        self.format_label = QLabel()
        self.format_label.setObjectName("statusLabel")
        self.status_bar.addPermanentWidget(self.format_label)
        self._update_format_label()

    def _setup_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        settings_action = file_menu.addAction("Settings...", self._show_settings)
        settings_action.setShortcut(QKeySequence("Ctrl+,"))
        clear_action = file_menu.addAction("Clear All", self.clear_all)
        clear_action.setShortcut(QKeySequence("Ctrl+L"))
        file_menu.addSeparator()
        quit_action = file_menu.addAction("Quit", self.close)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))

        help_menu = menubar.addMenu("Help")
        help_menu.addAction("Unit Reference", self._show_unit_reference)

    def _setup_header(self, layout):
        header = QFrame()
        header.setObjectName("headerFrame")
        hl = QHBoxLayout(header)
        hl.setContentsMargins(20, 16, 20, 16)

        titles = QVBoxLayout()
        title = QLabel("Land Area Calculator")
        title.setObjectName("titleLabel")
        titles.addWidget(title)
        titles.addWidget(QLabel(APP_SUBTITLE))
        hl.addLayout(titles)
        hl.addStretch()

        self.btn_settings = QPushButton("Settings")
        self.btn_settings.setObjectName("secondaryButton")
        self.btn_settings.setToolTip("Number format and theme")
        self.btn_settings.clicked.connect(self._show_settings)
        hl.addWidget(self.btn_settings)
        layout.addWidget(header)

    def _setup_inputs(self, layout):
        group = QGroupBox("Input")
        grid = QGridLayout()
        number_system = self.format_settings.number_system

        grid.addWidget(QLabel("Area Value"), 0, 0)
        self.input_area = NumberLineEdit("Enter area", number_system)
        self.input_area.value_changed.connect(self.recalculate)
        grid.addWidget(self.input_area, 1, 0)

        grid.addWidget(QLabel("Unit"), 0, 1)
        self.combo_unit = QComboBox()
        for unit in UNIT_DEFINITIONS:
            self.combo_unit.addItem(unit.display_name, unit.id)
        index = self.combo_unit.findData(settings.default_unit())
        self.combo_unit.setCurrentIndex(max(index, 0))
        self.combo_unit.currentIndexChanged.connect(self.recalculate)
        grid.addWidget(self.combo_unit, 1, 1)

        grid.addWidget(QLabel(f"Price ({CURRENCY_SYMBOL})"), 0, 2)
        self.input_price = NumberLineEdit("", number_system)
        self.input_price.value_changed.connect(self.recalculate)
        grid.addWidget(self.input_price, 1, 2)

        self.check_total_price = QCheckBox("This is total price (uncheck if price per unit)")
        self.check_total_price.setChecked(bool(settings.get("price_is_total", True)))
        self.check_total_price.toggled.connect(self._on_price_mode_changed)
        grid.addWidget(self.check_total_price, 2, 2)
        self._update_price_placeholder()

        self.btn_clear = QPushButton("Clear All")
        self.btn_clear.setObjectName("secondaryButton")
        self.btn_clear.clicked.connect(self.clear_all)
        grid.addWidget(self.btn_clear, 3, 0, 1, 3, Qt.AlignmentFlag.AlignRight)

        group.setLayout(grid)
        layout.addWidget(group)

    def _setup_results(self, layout):
        group = QGroupBox("Conversion Results")
        vl = QVBoxLayout()
        self.label_empty = QLabel("Enter an area value to see it in every unit.")
        self.label_empty.setObjectName("hintLabel")
        self.label_empty.setAlignment(Qt.AlignmentFlag.AlignCenter)
        vl.addWidget(self.label_empty)
        self.result_table = ResultTable(theme=self.current_theme)
        vl.addWidget(self.result_table)
        note = QLabel("Note: Some units may vary by region. These are standard conversions.")
        note.setObjectName("hintLabel")
        vl.addWidget(note)
        group.setLayout(vl)
        layout.addWidget(group, 1)

    # ============ CALCULATION ============
    def current_input(self) -> CalculationInput:
        return CalculationInput(
            area_value=NumberConverter.to_float(self.input_area.raw_text()),
            source_unit_id=self.combo_unit.currentData(),
            price_value=NumberConverter.to_float(self.input_price.raw_text()),
            price_is_total=self.check_total_price.isChecked(),
        )

    def recalculate(self, *_):
        calc_input = self.current_input()
        self.results = compute(calc_input)
        logger.debug(
            f"Recalculated: area={calc_input.area_value} unit={calc_input.source_unit_id} "
            f"price={calc_input.price_value} total={calc_input.price_is_total} -> {len(self.results)} rows"
        )
        self._render()

    def _render(self):
        has_results = bool(self.results)
        self.label_empty.setVisible(not has_results)
        self.result_table.setVisible(has_results)
        show_price = bool(self.input_price.raw_text())
        self.result_table.set_results(self.results, self.format_settings, show_price, CURRENCY_SYMBOL)
        if has_results:
            self.status_text.setText(f"{len(self.results)} units")
        elif self.input_area.raw_text():
            self.status_text.setText("Area is not a valid number")
        else:
            self.status_text.setText("Ready")

    def clear_all(self):
        self.input_area.clear()
        self.input_price.clear()
        self.recalculate()
        logger.info("Inputs cleared")

    def _on_price_mode_changed(self, checked):
        settings.set("price_is_total", bool(checked))
        self._update_price_placeholder()
        self.recalculate()

    def _update_price_placeholder(self):
        total = self.check_total_price.isChecked()
        self.input_price.setPlaceholderText("Enter total price" if total else "Enter price per unit")

    # ============ SETTINGS ============
    def _show_settings(self):
        dlg = SettingsDialog(self)
        dlg.settings_changed.connect(self._on_settings_changed)
        dlg.exec()

    def _on_settings_changed(self, new):
        self.format_settings = settings.format_settings()
        theme = new.get("theme", self.current_theme)
        if theme != self.current_theme:
            self.current_theme = theme
            self.setStyleSheet(get_stylesheet(theme))
            self.result_table.set_theme(theme)
        self.input_area.set_number_system(self.format_settings.number_system)
        self.input_price.set_number_system(self.format_settings.number_system)
        self._update_format_label()
        logger.info(
            f"Settings applied: system={self.format_settings.number_system} "
            f"precision={self.format_settings.precision} theme={self.current_theme}"
        )
        # formatting only; result values are unchanged
        self._render()

    def _update_format_label(self):
        fmt = self.format_settings
        self.format_label.setText(f"{NUMBER_SYSTEMS[fmt.number_system]} · {fmt.precision} dp")

    def _show_unit_reference(self):
        UnitReferenceDialog(self, self.current_theme).exec()

    def closeEvent(self, event):
        geo = self.geometry()
        unit = self.combo_unit.currentData()
        settings.update({
            "window_geometry": [geo.x(), geo.y(), geo.width(), geo.height()],
            "default_unit": unit if unit in UNITS else settings.default_unit(),
        })
        logger.info("Window closed")
        super().closeEvent(event)
