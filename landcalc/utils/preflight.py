"""
Startup self-check, run with `app_entry.py --preflight`.

Verifies that the GUI toolkit and the app's own modules import, that the unit
table is consistent, that a saved settings file can be used and that the data
and log directories can be created. Every check returns a list of problem
messages; an empty list means the check passed.
"""
import importlib
import importlib.util
import json
import math

from landcalc.config import THEMES
from landcalc.core.formatter import MAX_PRECISION, MIN_PRECISION, NUMBER_SYSTEMS
from landcalc.core.units import BASE_UNIT, UNIT_DEFINITIONS
from landcalc.utils.logger import get_logger
from landcalc.utils.paths import DATA_DIR, LOG_DIR, SETTINGS_PATH

GUI_PACKAGES = ("PyQt6",)

APP_MODULES = (
    "landcalc.core.engine",
    "landcalc.core.formatter",
    "landcalc.core.managers",
    "landcalc.ui.app",
)


def check_packages(packages=GUI_PACKAGES):
    return [f"Required library is missing: {name}" for name in packages if importlib.util.find_spec(name) is None]


def check_modules(modules=APP_MODULES):
    problems = []
    for name in modules:
        try:
            importlib.import_module(name)
        except Exception as e:
            problems.append(f"Cannot import {name}: {type(e).__name__}: {e}")
    return problems


def check_unit_table(units=UNIT_DEFINITIONS):
    """Unique ids, positive finite factors and a base unit of exactly 1 sq ft."""
    if not units:
        return ["Unit table is empty"]

    problems = []
    seen = set()
    for unit in units:
        if unit.id in seen:
            problems.append(f"Duplicate unit id: {unit.id}")
        seen.add(unit.id)
        factor = unit.factor_to_base
        if not (isinstance(factor, (int, float)) and math.isfinite(factor) and factor > 0):
            problems.append(f"Unit {unit.id} has an invalid factor: {factor!r}")

    base = [u for u in units if u.id == BASE_UNIT]
    if not base:
        problems.append(f"Base unit {BASE_UNIT} is missing")
    elif base[0].factor_to_base != 1:
        problems.append(f"Base unit {BASE_UNIT} must have factor 1, got {base[0].factor_to_base!r}")
    return problems


def check_settings_file(path=SETTINGS_PATH, units=UNIT_DEFINITIONS):
    """A missing file is fine; an existing one must be a JSON object with usable values."""
    if not path.exists():
        return []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        return [f"Settings file is not readable: {path} ({e})"]
    except json.JSONDecodeError as e:
        return [f"Settings file is not valid JSON: {path} (line {e.lineno}: {e.msg})"]
    if not isinstance(data, dict):
        return [f"Settings file must hold a JSON object: {path}"]

    problems = []
    if "number_system" in data and data["number_system"] not in NUMBER_SYSTEMS:
        problems.append(f"Unknown number_system in settings: {data['number_system']!r}")
    if "precision" in data:
        precision = data["precision"]
        if isinstance(precision, bool) or not isinstance(precision, int) \
                or not MIN_PRECISION <= precision <= MAX_PRECISION:
            problems.append(f"precision in settings must be an int in [{MIN_PRECISION}, {MAX_PRECISION}]: {precision!r}")
    if "theme" in data and data["theme"] not in THEMES:
        problems.append(f"Unknown theme in settings: {data['theme']!r}")
    if "default_unit" in data and data["default_unit"] not in {u.id for u in units}:
        problems.append(f"Unknown default_unit in settings: {data['default_unit']!r}")
    return problems


def check_directories(directories):
    problems = []
    for directory in directories:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            problems.append(f"Could not create directory: {directory} ({e})")
    return problems


def run_preflight_checks(settings_path=None, data_dir=None, log_dir=None, units=None, logger=None):
    app_logger = logger or get_logger("Preflight")
    units = UNIT_DEFINITIONS if units is None else units

    errors = check_packages()
    # app modules import PyQt6, so only try them when it is present
    if not errors:
        errors += check_modules()
    errors += check_unit_table(units)
    errors += check_settings_file(settings_path or SETTINGS_PATH, units)
    errors += check_directories([data_dir or DATA_DIR, log_dir or LOG_DIR])

    for message in errors:
        app_logger.error(message)
    if not errors:
        app_logger.info("Preflight passed")
    return len(errors) == 0, errors


def main() -> int:
    ok, errors = run_preflight_checks()
    for message in errors:
        print(message)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
