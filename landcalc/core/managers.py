import json
from threading import Lock

from landcalc.config import DEFAULT_NUMBER_SYSTEM, DEFAULT_PRECISION, DEFAULT_UNIT
from landcalc.core.formatter import FormatSettings
from landcalc.core.units import UNITS
from landcalc.utils.paths import SETTINGS_PATH
from landcalc.utils.logger import get_logger

# Display preferences only; area and price inputs are never written to disk.
DEFAULT_SETTINGS = {
    "theme": "light",
    "number_system": DEFAULT_NUMBER_SYSTEM,  # indian | international
    "precision": DEFAULT_PRECISION,  # 0-4 decimal digits
    "default_unit": DEFAULT_UNIT,
    "price_is_total": True,  # total price | price per unit
    "window_geometry": None,
}


class SettingsManager:
    _instance = None
    _lock = Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized: return
        self._initialized = True
        self._settings = DEFAULT_SETTINGS.copy()
        self._path = SETTINGS_PATH
        self._load()

    def _load(self):
        if self._path.exists():
            try:
                with open(self._path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    self._settings.update(data)
                else:
                    get_logger('SettingsManager').warning(f"Ignoring malformed settings file: {self._path}")
            except (OSError, json.JSONDecodeError) as e:
                get_logger('SettingsManager').warning(f"Failed to load settings: {e}")

    def _save(self):
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w', encoding='utf-8') as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
        except OSError as e:
            get_logger('SettingsManager').warning(f"Failed to save settings: {e}")

    def get(self, key, default=None): return self._settings.get(key, default)
    def set(self, key, value): self._settings[key] = value; self._save()
    def update(self, data): self._settings.update(data); self._save()

    def format_settings(self) -> FormatSettings:
        """Validated display settings; bad stored values fall back to defaults."""
        return FormatSettings.coerce(self.get("number_system"), self.get("precision"))

    def default_unit(self):
        unit = self.get("default_unit", DEFAULT_UNIT)
        return unit if unit in UNITS else DEFAULT_UNIT


settings = SettingsManager()
