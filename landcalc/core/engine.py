"""
Conversion & pricing engine.

`compute` derives the area, and the price per unit when a price is given, in
every known unit from a single input snapshot. It is a pure function: callers
invoke it again after every input change.
"""
from dataclasses import dataclass
from typing import List, Optional

from landcalc.core.units import UNIT_DEFINITIONS, UnknownUnitError, as_mapping, get_unit
from landcalc.utils.converters import NumberConverter


@dataclass(frozen=True)
class CalculationInput:
    area_value: Optional[float]
    source_unit_id: str
    price_value: Optional[float] = None
    price_is_total: bool = True


@dataclass(frozen=True)
class ConversionResult:
    unit_id: str
    display_name: str
    area: float
    price_per_unit: Optional[float]
    is_source_unit: bool

    @property
    def has_price(self):
        return self.price_per_unit is not None


def _price_per_base(price, base_area, source_factor, price_is_total):
    """Price per square foot, or None when it cannot be derived."""
    if price is None or price == 0:
        return None
    divisor = base_area if price_is_total else source_factor
    if divisor == 0:
        return None
    per_base = price / divisor
    return per_base if NumberConverter.is_finite(per_base) else None


def compute(calc_input: CalculationInput, units=UNIT_DEFINITIONS) -> List[ConversionResult]:
    area_value = NumberConverter.to_float(calc_input.area_value)
    if area_value is None:
        return []
    try:
        source = get_unit(calc_input.source_unit_id, as_mapping(units))
    except UnknownUnitError:
        return []

    base_area = area_value * source.factor_to_base
    price = NumberConverter.to_float(calc_input.price_value)
    per_base = _price_per_base(price, base_area, source.factor_to_base, calc_input.price_is_total)

    results = []
    for unit in (units.values() if hasattr(units, "values") else units):
        price_per_unit = None
        if per_base is not None:
            price_per_unit = per_base * unit.factor_to_base
            if not NumberConverter.is_finite(price_per_unit):
                price_per_unit = None
        results.append(ConversionResult(
            unit_id=unit.id,
            display_name=unit.display_name,
            area=base_area / unit.factor_to_base,
            price_per_unit=price_per_unit,
            is_source_unit=unit.id == source.id,
        ))

    # sorted() is stable: equal areas keep table order
    return sorted(results, key=lambda r: r.area, reverse=True)


def convert_area(value, from_unit, to_unit, units=UNIT_DEFINITIONS) -> float:
    """Convert one value between two units via square feet."""
    table = as_mapping(units)
    return float(value) * get_unit(from_unit, table).factor_to_base / get_unit(to_unit, table).factor_to_base


def to_base_area(result: ConversionResult, units=UNIT_DEFINITIONS) -> float:
    """Square-foot area represented by a result row."""
    return result.area * get_unit(result.unit_id, as_mapping(units)).factor_to_base


def find_source(results: List[ConversionResult]) -> Optional[ConversionResult]:
    return next((r for r in results if r.is_source_unit), None)
