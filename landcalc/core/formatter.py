"""
Locale-aware number formatting.

Two conventions are supported:

- indian: 12,34,567 grouping with K / L (lakh) / Cr (crore) abbreviations
- international: 1,234,567 grouping with K / M / B abbreviations

`format_number` produces the abbreviated display form used in result cells.
`format_editable` and `parse_editable` handle the raw grouped form used in
input fields, which never carries a magnitude suffix.
"""
import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from landcalc.utils.converters import NumberConverter

INDIAN = "indian"
INTERNATIONAL = "international"
NUMBER_SYSTEMS = (INDIAN, INTERNATIONAL)

MIN_PRECISION = 0
MAX_PRECISION = 4

SCIENTIFIC_THRESHOLD = 0.001

# (threshold, suffix), largest first
MAGNITUDE_SCALES = {
    INDIAN: ((10_000_000, " Cr"), (100_000, " L"), (1_000, " K")),
    INTERNATIONAL: ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K")),
}

_PAIRS_RE = re.compile(r'\B(?=(\d{2})+(?!\d))')
_TRIPLES_RE = re.compile(r'\B(?=(\d{3})+(?!\d))')
_TRAILING_ZEROS_RE = re.compile(r'\.?0+$')
_EDITABLE_RE = re.compile(r'([+-]?)(\d*)(\.\d*)?')


@dataclass(frozen=True)
class FormatSettings:
    number_system: str = INDIAN
    precision: int = 2

    def __post_init__(self):
        if self.number_system not in NUMBER_SYSTEMS:
            raise ValueError(f"Unknown number system: {self.number_system!r}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an int: {self.precision!r}")
        if not MIN_PRECISION <= self.precision <= MAX_PRECISION:
            raise ValueError(f"precision out of range [{MIN_PRECISION}, {MAX_PRECISION}]: {self.precision}")

    @classmethod
    def coerce(cls, number_system=None, precision=None):
        """Build settings from loosely typed values, falling back to defaults."""
        system = number_system if number_system in NUMBER_SYSTEMS else INDIAN
        try:
            digits = int(precision)
        except (TypeError, ValueError):
            digits = 2
        return cls(system, min(max(digits, MIN_PRECISION), MAX_PRECISION))


def _group_integer(digits, number_system):
    if number_system == INDIAN:
        if len(digits) <= 3:
            return digits
        head, tail = digits[:-3], digits[-3:]
        return _PAIRS_RE.sub(",", head) + "," + tail
    return _TRIPLES_RE.sub(",", digits)


def group_digits(num_str, number_system=INDIAN):
    """
    Insert grouping separators into a plain decimal string and drop trailing
    fractional zeros, e.g. "1234567.50" -> "12,34,567.5" (indian).
    """
    text = str(num_str)
    sign = ""
    if text and text[0] in "+-":
        sign, text = ("-" if text[0] == "-" else ""), text[1:]
    integer_part, _, decimal_part = text.partition(".")
    decimal_part = _TRAILING_ZEROS_RE.sub("", "." + decimal_part) if decimal_part else ""
    return sign + _group_integer(integer_part, number_system) + decimal_part


def _round_fixed(value, precision):
    """Fixed-point string rounded half-up on the exact binary value."""
    with localcontext() as ctx:
        ctx.prec = 400
        quantum = Decimal(1).scaleb(-precision)
        return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_number(value, settings=None):
    if settings is None:
        settings = FormatSettings()
    if value is None or isinstance(value, bool):
        return "0"
    try:
        value = float(value)
    except (TypeError, ValueError):
        return "0"
    if value == 0 or not math.isfinite(value):
        return "0"

    if abs(value) < SCIENTIFIC_THRESHOLD:
        return f"{value:.3e}"

    divisor, suffix = 1, ""
    for threshold, scale_suffix in MAGNITUDE_SCALES[settings.number_system]:
        if abs(value) >= threshold:
            divisor, suffix = threshold, scale_suffix
            break

    fixed = _round_fixed(value / divisor, settings.precision)
    if Decimal(fixed) == 0:
        return "0"
    return group_digits(fixed, settings.number_system) + suffix


def parse_editable(text):
    """Strip grouping separators, leaving a plain decimal string."""
    if text is None:
        return ""
    return NumberConverter.strip_separators(text)


def _plain(value):
    normalized = Decimal(repr(float(value))).normalize()
    return format(normalized, "f")


def format_editable(text, number_system=INDIAN):
    """
    Group the digits of an input field's text without abbreviating it.

    The typed fractional part is kept verbatim so partially entered decimals
    ("12.", "1.50") survive re-formatting. Text that does not parse as a
    number is returned unchanged.
    """
    if text is None or text == "":
        return ""
    raw = parse_editable(text)
    if NumberConverter.to_float(raw) is None:
        return text
    match = _EDITABLE_RE.fullmatch(raw)
    if match is None:
        # exponent forms such as "1e5"
        return group_digits(_plain(raw), number_system)
    sign, integer_part, fraction = match.groups()
    integer_part = str(int(integer_part)) if integer_part else ""
    return ("-" if sign == "-" else "") + _group_integer(integer_part, number_system) + (fraction or "")
