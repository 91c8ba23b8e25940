"""
Land area unit table.

Every unit is defined by its size in square feet, the common base unit all
conversions route through. Regional units (bigha, katha, ...) vary by state;
the factors below are the commonly used values.
"""
from dataclasses import dataclass
from types import MappingProxyType


class UnknownUnitError(KeyError):
    """Raised when a unit id is not in the table."""


@dataclass(frozen=True)
class UnitDefinition:
    id: str
    display_name: str
    factor_to_base: float
    region: str = ""

    def __post_init__(self):
        if not self.factor_to_base > 0:
            raise ValueError(f"factor_to_base must be positive: {self.id}={self.factor_to_base}")


BASE_UNIT = "sqft"

UNIT_DEFINITIONS = (
    UnitDefinition("sqft", "Square Feet", 1),
    UnitDefinition("sqyd", "Square Yards", 9),
    UnitDefinition("sqm", "Square Meters", 10.764),
    UnitDefinition("vaar", "Vaar", 9, "Gujarat/Rajasthan"),
    UnitDefinition("guntha", "Guntha", 1089, "Maharashtra"),
    UnitDefinition("pench", "Pench", 484, "Gujarat"),
    UnitDefinition("bigha", "Bigha", 27225, "standard, varies by region"),
    UnitDefinition("acre", "Acre", 43560),
    UnitDefinition("hectare", "Hectare", 107639.1),
    UnitDefinition("katha", "Katha", 720, "Bengal/Bihar"),
    UnitDefinition("cent", "Cent", 435.6, "South India"),
    UnitDefinition("dismil", "Dismil", 435.6, "same as cent"),
    UnitDefinition("marla", "Marla", 272.25, "Punjab/Pakistan"),
    UnitDefinition("kanal", "Kanal", 5445, "Kashmir/Punjab"),
)


def index_units(definitions):
    """Index unit definitions by id; a repeated id raises ValueError."""
    table = {}
    for unit in definitions:
        if unit.id in table:
            raise ValueError(f"duplicate unit id: {unit.id}")
        table[unit.id] = unit
    return table


UNITS = MappingProxyType(index_units(UNIT_DEFINITIONS))


def get_unit(unit_id, units=UNITS) -> UnitDefinition:
    try:
        return units[unit_id]
    except (KeyError, TypeError):
        raise UnknownUnitError(unit_id) from None


def unit_ids(units=UNIT_DEFINITIONS):
    return [u.id for u in units]


def as_mapping(units):
    """Index a sequence of definitions by id, keeping a mapping as-is."""
    if isinstance(units, (dict, MappingProxyType)):
        return units
    return index_units(units)
