import json
import os
import time
from datetime import datetime
from pathlib import Path
import sys

# Headless-friendly default for benchmark environments.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from PyQt6.QtWidgets import QApplication

from landcalc.core.engine import CalculationInput, compute
from landcalc.core.formatter import FormatSettings, INDIAN, INTERNATIONAL, format_number
from landcalc.ui.app import LandCalculatorApp
from landcalc.utils.helpers import DateTimeHelper
from landcalc.utils.paths import LOG_DIR, ensure_directories


def _benchmark_compute():
    calc_input = CalculationInput(12345.678, "guntha", 98765432.0, True)
    n = 20000
    start = time.perf_counter()
    for _ in range(n):
        compute(calc_input)
    elapsed = time.perf_counter() - start
    throughput = n / elapsed if elapsed > 0 else 0
    return {"iterations": n, "elapsed_sec": elapsed, "throughput_per_sec": throughput}


def _benchmark_format():
    values = [0.0004, 12.5, 4567.891, 123456.7, 98765432.1, 1.5e10]
    settings = [FormatSettings(INDIAN, 2), FormatSettings(INTERNATIONAL, 4)]
    n = 5000
    start = time.perf_counter()
    for _ in range(n):
        for fmt in settings:
            for v in values:
                format_number(v, fmt)
    elapsed = time.perf_counter() - start
    calls = n * len(values) * len(settings)
    return {"calls": calls, "elapsed_sec": elapsed, "calls_per_sec": calls / elapsed if elapsed > 0 else 0}


def _benchmark_app_render(app):
    start = time.perf_counter()
    window = LandCalculatorApp()
    init_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    for i in range(200):
        window.input_area.set_raw_text(str(1000 + i))
        app.processEvents()
    render_elapsed = time.perf_counter() - start

    window.deleteLater()
    app.processEvents()
    return {"init_elapsed_sec": init_elapsed, "render_200_elapsed_sec": render_elapsed}


def main():
    ensure_directories()
    app = QApplication.instance() or QApplication([])

    results = {
        "timestamp": datetime.now().isoformat(),
        "compute": _benchmark_compute(),
        "format": _benchmark_format(),
        "app": _benchmark_app_render(app),
    }

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    out_path = LOG_DIR / f"perf_{DateTimeHelper.file_timestamp()}.json"
    out_path.write_text(json.dumps(results, ensure_ascii=False, indent=2), encoding="utf-8")

    print("Performance baseline")
    print(f"- compute throughput: {results['compute']['throughput_per_sec']:.2f} calls/s")
    print(f"- format throughput: {results['format']['calls_per_sec']:.2f} calls/s")
    print(f"- app init: {results['app']['init_elapsed_sec']:.4f}s")
    print(f"- render x200: {results['app']['render_200_elapsed_sec']:.4f}s")
    print(f"- json: {out_path}")


if __name__ == "__main__":
    raise SystemExit(main())
