import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from landcalc.utils.converters import NumberConverter


class TestNumberConverter(unittest.TestCase):
    def test_to_float_accepts_grouped_text(self):
        self.assertEqual(NumberConverter.to_float("1,234.5"), 1234.5)
        self.assertEqual(NumberConverter.to_float("12,34,567"), 1234567.0)
        self.assertEqual(NumberConverter.to_float(" 12 "), 12.0)
        self.assertEqual(NumberConverter.to_float("1 234"), 1234.0)

    def test_to_float_numbers(self):
        self.assertEqual(NumberConverter.to_float(5), 5.0)
        self.assertEqual(NumberConverter.to_float(-2.5), -2.5)
        self.assertEqual(NumberConverter.to_float(0), 0.0)

    def test_to_float_rejects_malformed(self):
        for value in (None, "", "   ", "abc", "12abc", "1.2.3", True, float("nan"), "inf", "-Infinity"):
            self.assertIsNone(NumberConverter.to_float(value), value)

    def test_strip_separators(self):
        self.assertEqual(NumberConverter.strip_separators("1,23,456"), "123456")
        self.assertEqual(NumberConverter.strip_separators(None), "")

    def test_is_finite(self):
        self.assertTrue(NumberConverter.is_finite(1.5))
        self.assertFalse(NumberConverter.is_finite(float("inf")))
        self.assertFalse(NumberConverter.is_finite(None))
        self.assertFalse(NumberConverter.is_finite(False))


if __name__ == "__main__":
    unittest.main()
