from PyQt6.QtWidgets import QDialog, QVBoxLayout, QTextBrowser, QPushButton

from landcalc.config import APP_TITLE
from landcalc.core.formatter import FormatSettings, INTERNATIONAL, format_number
from landcalc.core.units import UNIT_DEFINITIONS
from landcalc.ui.styles import get_token


class UnitReferenceDialog(QDialog):
    """Reference sheet: size of every unit in square feet and square meters."""
    def __init__(self, parent=None, theme="light", units=UNIT_DEFINITIONS):
        super().__init__(parent)
        self.setWindowTitle("Unit Reference")
        self.setMinimumSize(480, 520)
        accent = get_token(theme, "accent_blue")
        muted = get_token(theme, "text_muted")
        fmt = FormatSettings(INTERNATIONAL, 4)
        sqm = next((u.factor_to_base for u in units if u.id == "sqm"), None)

        rows = []
        for i, unit in enumerate(units):
            shade = f' style="background-color: {accent}14;"' if i % 2 == 0 else ""
            in_sqm = format_number(unit.factor_to_base / sqm, fmt) if sqm else "-"
            rows.append(
                f"<tr{shade}><td style='padding: 4px 10px;'><b>{unit.display_name}</b>"
                f"<br><span style='color: {muted}; font-size: 11px;'>{unit.region}</span></td>"
                f"<td style='padding: 4px 10px; text-align: right;'>{unit.factor_to_base:,g}</td>"
                f"<td style='padding: 4px 10px; text-align: right;'>{in_sqm}</td></tr>"
            )

        layout = QVBoxLayout(self)
        layout.setSpacing(12)
        self.browser = QTextBrowser()
        self.browser.setHtml(f"""
        <h2 style="color: {accent}; text-align: center;">{APP_TITLE}</h2>
        <p style="color: {muted}; text-align: center; font-size: 12px;">
            All conversions go through square feet. Regional units vary by state;
            the values below are the common ones.
        </p>
        <table style="width: 100%; border-collapse: collapse;">
            <tr><th align="left">Unit</th><th align="right">Sq ft</th><th align="right">Sq m</th></tr>
            {''.join(rows)}
        </table>
        """)
        layout.addWidget(self.browser)
        btn = QPushButton("Close")
        btn.clicked.connect(self.accept)
        layout.addWidget(btn)
