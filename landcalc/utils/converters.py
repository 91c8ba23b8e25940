import math


class NumberConverter:
    """Lenient text -> number conversion for user-entered values."""

    SEPARATORS = (",", " ", "\u00a0", "_")

    @classmethod
    def strip_separators(cls, text):
        if text is None: return ""
        val = str(text)
        for sep in cls.SEPARATORS:
            val = val.replace(sep, "")
        return val.strip()

    @classmethod
    def to_float(cls, value):
        """Return a finite float, or None for empty, malformed or non-finite input."""
        if value is None or isinstance(value, bool): return None
        if isinstance(value, (int, float)):
            num = float(value)
        else:
            val = cls.strip_separators(value)
            if not val: return None
            try:
                num = float(val)
            except ValueError:
                return None
        return num if math.isfinite(num) else None

    @staticmethod
    def is_finite(value):
        return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
