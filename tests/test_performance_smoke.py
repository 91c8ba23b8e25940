import importlib.util
import os
import sys
import time
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from landcalc.core.engine import CalculationInput, compute
from landcalc.core.formatter import FormatSettings, INDIAN, INTERNATIONAL, format_number


class TestCorePerformanceSmoke(unittest.TestCase):
    def test_compute_throughput_smoke(self):
        calc_input = CalculationInput(12345.678, "guntha", 98765432.0, True)
        n = 5000
        start = time.perf_counter()
        for _ in range(n):
            compute(calc_input)
        elapsed = time.perf_counter() - start
        throughput = n / elapsed if elapsed > 0 else 0
        # loose lower bound for slow CI runners
        self.assertGreater(throughput, 500)

    def test_format_throughput_smoke(self):
        values = [0.0004, 12.5, 4567.891, 123456.7, 98765432.1, 1.5e10]
        settings = (FormatSettings(INDIAN, 2), FormatSettings(INTERNATIONAL, 4))
        start = time.perf_counter()
        for _ in range(1000):
            for fmt in settings:
                for v in values:
                    format_number(v, fmt)
        elapsed = time.perf_counter() - start
        self.assertLess(elapsed, 3.0)


@unittest.skipIf(importlib.util.find_spec("PyQt6") is None, "PyQt6 is not installed")
class TestRenderPerformanceSmoke(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        from PyQt6.QtWidgets import QApplication

        cls._qt_app = QApplication.instance() or QApplication([])

    def test_result_table_rerender_smoke(self):
        from landcalc.ui.widgets import ResultTable

        table = ResultTable()
        results = compute(CalculationInput(2.5, "acre", 5000000, True))
        fmt = FormatSettings(INDIAN, 2)
        start = time.perf_counter()
        for _ in range(200):
            table.set_results(results, fmt, True, "₹")
        self._qt_app.processEvents()
        elapsed = time.perf_counter() - start
        self.assertEqual(table.rowCount(), 14)
        self.assertLess(elapsed, 5.0)
        table.deleteLater()
        self._qt_app.processEvents()


if __name__ == "__main__":
    unittest.main()
