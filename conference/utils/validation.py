import re

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_string(value):
    """Trims and lower-cases a string; anything falsy becomes None."""
    if not value or not isinstance(value, str):
        return None
    value = value.strip().lower()
    return value or None


def parse_positive_int(value):
    """Reads the leading integer of value ("7.5" -> 7, "12abc" -> 12) and
    returns it if positive, otherwise None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = int(value)
        except (OverflowError, ValueError):
            # inf / nan
            return None
    else:
        match = LEADING_INT.match(str(value))
        if not match:
            return None
        number = int(match.group(1))
    return number if number > 0 else None
