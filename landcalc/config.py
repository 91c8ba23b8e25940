from landcalc.utils.paths import BASE_DIR, DATA_DIR, LOG_DIR, SETTINGS_PATH, get_resource_path

# ============ CONFIG ============
APP_VERSION = "v1.2"
APP_TITLE = f"Land Area Calculator {APP_VERSION}"
APP_SUBTITLE = "Convert between units and calculate rates"

APP_ICON_PATH = get_resource_path("icon.ico")

# ============ NUMBER FORMAT ============
NUMBER_SYSTEMS = {
    "indian": "Indian (Lakh, Crore)",
    "international": "International (K, M, B)",
}
DEFAULT_NUMBER_SYSTEM = "indian"
PRECISION_RANGE = (0, 4)
DEFAULT_PRECISION = 2

# ============ CALCULATOR ============
DEFAULT_UNIT = "sqft"
CURRENCY_SYMBOL = "₹"
THEMES = ["light", "dark"]

__all__ = [
    "APP_VERSION", "APP_TITLE", "APP_SUBTITLE", "APP_ICON_PATH",
    "BASE_DIR", "DATA_DIR", "LOG_DIR", "SETTINGS_PATH",
    "NUMBER_SYSTEMS", "DEFAULT_NUMBER_SYSTEM", "PRECISION_RANGE", "DEFAULT_PRECISION",
    "DEFAULT_UNIT", "CURRENCY_SYMBOL", "THEMES",
]
