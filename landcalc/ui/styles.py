"""
UI stylesheets built from design tokens.
Light theme follows the blue/indigo calculator palette; dark mirrors it.
"""

# ============ DESIGN TOKENS ============
DESIGN_TOKENS = {
    "light": {
        # background
        "bg_primary": "#eef2ff",
        "bg_secondary": "#ffffff",
        "bg_card": "#ffffff",
        "bg_input": "#ffffff",
        "bg_hover": "#e0e7ff",
        "bg_header": "#4f46e5",
        "bg_source_row": "#dbeafe",

        # text
        "text_primary": "#1f2937",
        "text_secondary": "#4b5563",
        "text_muted": "#9ca3af",
        "text_on_header": "#ffffff",

        # accent
        "accent_blue": "#2563eb",
        "accent_blue_hover": "#1d4ed8",
        "accent_green": "#16a34a",

        # border
        "border_subtle": "#e5e7eb",
        "border_medium": "#d1d5db",
        "border_focus": "#3b82f6",
    },
    "dark": {
        # background
        "bg_primary": "#0f0f1a",
        "bg_secondary": "#1a1a2e",
        "bg_card": "#252540",
        "bg_input": "rgba(255, 255, 255, 0.08)",
        "bg_hover": "rgba(255, 255, 255, 0.12)",
        "bg_header": "#312e81",
        "bg_source_row": "#1e3a8a",

        # text
        "text_primary": "#ffffff",
        "text_secondary": "#a0a0b0",
        "text_muted": "#666677",
        "text_on_header": "#ffffff",

        # accent
        "accent_blue": "#4a9eff",
        "accent_blue_hover": "#60a5fa",
        "accent_green": "#22c55e",

        # border
        "border_subtle": "rgba(255, 255, 255, 0.1)",
        "border_medium": "rgba(255, 255, 255, 0.2)",
        "border_focus": "#4a9eff",
    },
}

RADIUS = {
    "sm": "6px",
    "md": "10px",
    "lg": "14px",
}

SPACING = {
    "xs": "4px",
    "sm": "8px",
    "md": "12px",
    "lg": "16px",
}

FONT_SIZE = {
    "sm": "12px",
    "md": "13px",
    "lg": "14px",
    "2xl": "20px",
}


def _build_stylesheet(t):
    return f"""
QMainWindow, QWidget {{
    background-color: {t["bg_primary"]};
    color: {t["text_primary"]};
    font-family: 'Segoe UI', -apple-system, sans-serif;
    font-size: {FONT_SIZE["md"]};
}}

QFrame#headerFrame {{
    background-color: {t["bg_header"]};
    border-radius: {RADIUS["lg"]};
}}
QFrame#headerFrame QLabel {{
    background-color: transparent;
    color: {t["text_on_header"]};
}}
QLabel#titleLabel {{
    font-size: {FONT_SIZE["2xl"]};
    font-weight: bold;
}}

QGroupBox {{
    border: 1px solid {t["border_subtle"]};
    border-radius: {RADIUS["lg"]};
    margin-top: 1.5em;
    padding: {SPACING["lg"]};
    font-weight: 600;
    font-size: {FONT_SIZE["lg"]};
    background-color: {t["bg_card"]};
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    left: {SPACING["lg"]};
    padding: 0 {SPACING["md"]};
    color: {t["accent_blue"]};
}}

QLineEdit, QSpinBox, QComboBox {{
    background-color: {t["bg_input"]};
    border: 1px solid {t["border_medium"]};
    border-radius: {RADIUS["md"]};
    padding: {SPACING["sm"]} {SPACING["md"]};
    color: {t["text_primary"]};
    min-height: 30px;
}}
QLineEdit:focus, QSpinBox:focus, QComboBox:focus {{
    border: 2px solid {t["border_focus"]};
}}

QPushButton {{
    background-color: {t["accent_blue"]};
    color: #ffffff;
    border: none;
    border-radius: {RADIUS["md"]};
    padding: {SPACING["sm"]} {SPACING["lg"]};
    font-weight: 600;
}}
QPushButton:hover {{
    background-color: {t["accent_blue_hover"]};
}}
QPushButton#secondaryButton {{
    background-color: {t["bg_hover"]};
    color: {t["text_primary"]};
}}

QTableWidget {{
    background-color: {t["bg_secondary"]};
    gridline-color: {t["border_subtle"]};
    border: 1px solid {t["border_subtle"]};
    border-radius: {RADIUS["lg"]};
    alternate-background-color: {t["bg_primary"]};
}}
QHeaderView::section {{
    background-color: {t["bg_card"]};
    color: {t["text_secondary"]};
    padding: {SPACING["sm"]};
    border: none;
    border-bottom: 1px solid {t["border_medium"]};
    font-weight: 600;
}}

QLabel#hintLabel, QLabel#statusLabel {{
    color: {t["text_muted"]};
    font-size: {FONT_SIZE["sm"]};
}}
"""


def get_stylesheet(theme="light"):
    """Stylesheet for the given theme; unknown themes fall back to light."""
    return _build_stylesheet(DESIGN_TOKENS.get(theme, DESIGN_TOKENS["light"]))


def get_token(theme="light", key=None):
    """Single design token value, or the whole token dict. Unknown themes use light."""
    tokens = DESIGN_TOKENS.get(theme, DESIGN_TOKENS["light"])
    if key:
        return tokens.get(key)
    return tokens
