import math
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from landcalc.core.engine import (
    CalculationInput,
    compute,
    convert_area,
    find_source,
    to_base_area,
)
from landcalc.core.formatter import FormatSettings, INDIAN, INTERNATIONAL, format_number
from landcalc.core.units import UNIT_DEFINITIONS, UNITS, UnitDefinition


def _by_id(results):
    return {r.unit_id: r for r in results}


class TestCompute(unittest.TestCase):
    def test_one_result_per_unit(self):
        results = compute(CalculationInput(1, "acre"))
        self.assertEqual(len(results), len(UNIT_DEFINITIONS))
        self.assertEqual({r.unit_id for r in results}, set(UNITS.keys()))

    def test_areas_for_one_acre(self):
        rows = _by_id(compute(CalculationInput(1, "acre")))
        self.assertAlmostEqual(rows["sqft"].area, 43560)
        self.assertAlmostEqual(rows["sqyd"].area, 4840)
        self.assertAlmostEqual(rows["guntha"].area, 40)
        self.assertAlmostEqual(rows["cent"].area, 100)
        self.assertAlmostEqual(rows["kanal"].area, 8)
        self.assertAlmostEqual(rows["acre"].area, 1)
        self.assertAlmostEqual(rows["hectare"].area, 43560 / 107639.1)

    def test_sorted_by_descending_area_with_stable_ties(self):
        results = compute(CalculationInput(1, "acre"))
        areas = [r.area for r in results]
        self.assertEqual(areas, sorted(areas, reverse=True))
        self.assertEqual(
            [r.unit_id for r in results],
            ["sqft", "sqyd", "vaar", "sqm", "marla", "cent", "dismil",
             "pench", "katha", "guntha", "kanal", "bigha", "acre", "hectare"],
        )

    def test_exactly_one_source_unit(self):
        for unit in UNIT_DEFINITIONS:
            results = compute(CalculationInput(3.5, unit.id))
            flagged = [r for r in results if r.is_source_unit]
            self.assertEqual(len(flagged), 1)
            self.assertEqual(flagged[0].unit_id, unit.id)
            self.assertAlmostEqual(find_source(results).area, 3.5)

    def test_total_price(self):
        rows = _by_id(compute(CalculationInput(1, "acre", 4356000, price_is_total=True)))
        self.assertAlmostEqual(rows["sqft"].price_per_unit, 100)
        self.assertAlmostEqual(rows["guntha"].price_per_unit, 108900)
        self.assertAlmostEqual(rows["acre"].price_per_unit, 4356000)

    def test_price_per_unit(self):
        rows = _by_id(compute(CalculationInput(2, "guntha", 1089, price_is_total=False)))
        self.assertAlmostEqual(rows["sqft"].price_per_unit, 1)
        self.assertAlmostEqual(rows["guntha"].price_per_unit, 1089)
        self.assertAlmostEqual(rows["acre"].price_per_unit, 43560)
        # area does not scale a per-unit price
        self.assertAlmostEqual(rows["guntha"].area, 2)

    def test_no_price_means_absent(self):
        for price in (None, 0, 0.0, float("nan"), "", "abc"):
            results = compute(CalculationInput(10, "sqft", price))
            self.assertTrue(all(r.price_per_unit is None for r in results), price)
            self.assertFalse(any(r.has_price for r in results))

    def test_zero_area_with_total_price(self):
        results = compute(CalculationInput(0, "bigha", 500000, price_is_total=True))
        self.assertEqual(len(results), len(UNIT_DEFINITIONS))
        self.assertTrue(all(r.area == 0 for r in results))
        self.assertTrue(all(r.price_per_unit is None for r in results))
        # all areas tie, so table order is kept
        self.assertEqual([r.unit_id for r in results], [u.id for u in UNIT_DEFINITIONS])

    def test_zero_area_with_price_per_unit(self):
        rows = _by_id(compute(CalculationInput(0, "acre", 43560, price_is_total=False)))
        self.assertAlmostEqual(rows["sqft"].price_per_unit, 1)

    def test_malformed_area_yields_no_results(self):
        for area in (None, "", "abc", "12abc", float("nan"), float("inf"), float("-inf")):
            self.assertEqual(compute(CalculationInput(area, "sqft")), [], area)

    def test_grouped_text_area_is_accepted(self):
        rows = _by_id(compute(CalculationInput("1,089", "sqft")))
        self.assertAlmostEqual(rows["guntha"].area, 1)

    def test_unknown_source_unit_yields_no_results(self):
        self.assertEqual(compute(CalculationInput(1, "furlong")), [])
        self.assertEqual(compute(CalculationInput(1, None)), [])

    def test_custom_unit_table(self):
        units = [UnitDefinition("small", "Small", 1), UnitDefinition("big", "Big", 4)]
        results = compute(CalculationInput(2, "big", 80), units)
        self.assertEqual([r.unit_id for r in results], ["small", "big"])
        self.assertAlmostEqual(results[0].area, 8)
        self.assertAlmostEqual(results[0].price_per_unit, 10)
        self.assertAlmostEqual(results[1].price_per_unit, 40)

    def test_custom_table_with_duplicate_ids_is_rejected(self):
        units = [UnitDefinition("x", "X", 1), UnitDefinition("x", "X2", 2)]
        with self.assertRaises(ValueError):
            compute(CalculationInput(1, "x"), units)

    def test_is_deterministic(self):
        calc_input = CalculationInput(123.45, "katha", 999999, True)
        self.assertEqual(compute(calc_input), compute(calc_input))


class TestRoundTrip(unittest.TestCase):
    def test_results_convert_back_to_base_area(self):
        for area in (0.25, 1, 123.456, 98765.4321, 1e7):
            for source in UNIT_DEFINITIONS:
                base = area * source.factor_to_base
                for result in compute(CalculationInput(area, source.id)):
                    self.assertTrue(
                        math.isclose(to_base_area(result), base, rel_tol=1e-12),
                        f"{area} {source.id} -> {result.unit_id}",
                    )

    def test_convert_area(self):
        self.assertEqual(convert_area(1, "acre", "sqft"), 43560)
        self.assertAlmostEqual(convert_area(1, "hectare", "acre"), 107639.1 / 43560)
        self.assertAlmostEqual(convert_area(convert_area(7, "marla", "sqm"), "sqm", "marla"), 7)


class TestFormattingDoesNotChangeValues(unittest.TestCase):
    def test_settings_only_change_text(self):
        results = compute(CalculationInput(12.5, "acre", 25000000, True))
        snapshot = [(r.unit_id, r.area, r.price_per_unit) for r in results]
        texts = set()
        for fmt in (FormatSettings(INDIAN, 0), FormatSettings(INDIAN, 4), FormatSettings(INTERNATIONAL, 2)):
            texts.add(tuple(format_number(r.area, fmt) for r in results))
        self.assertEqual(len(texts), 3)
        self.assertEqual([(r.unit_id, r.area, r.price_per_unit) for r in results], snapshot)


if __name__ == "__main__":
    unittest.main()
