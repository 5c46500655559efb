"""
Field coercion helpers.
Best-effort conversion of loosely typed request values (form strings,
JSON scalars) into the types stored on a booking. None of these raise.
"""

import math
from typing import Any

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -2 ** 63
SQLITE_INT_MAX = 2 ** 63 - 1


def clean_string(value: Any) -> Any:
    """
    Trim a string value.

    Args:
        value: Any input value

    Returns:
        The stripped string for str input, otherwise the input unchanged
    """
    if isinstance(value, str):
        return value.strip()
    return value


def coerce_boolean(value: Any) -> bool:
    """
    Parse a boolean flag.

    Only the string 'true' and the boolean True count as true;
    '1', 1, 'yes' and anything else are false.

    Args:
        value: Any input value

    Returns:
        True or False
    """
    return value is True or value == 'true'


def coerce_number(value: Any) -> int | float:
    """
    Parse a numeric value, defaulting to 0.

    Args:
        value: Any input value (str, int, float, bool or None)

    Returns:
        int for integral strings and ints, float for decimals and for
        integers outside the 64-bit range, 0 when unparsable
    """
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return 0
    else:
        return 0

    if isinstance(number, int) and not SQLITE_INT_MIN <= number <= SQLITE_INT_MAX:
        try:
            number = float(number)
        except OverflowError:
            return 0
    if isinstance(number, float) and not math.isfinite(number):
        return 0
    return number


def coerce_field(name: str, value: Any, boolean_fields, number_fields) -> Any:
    """
    Coerce a single field according to its classification.

    Args:
        name: Field name
        value: Raw value from the request
        boolean_fields: Names stored as booleans
        number_fields: Names stored as numbers

    Returns:
        Coerced value
    """
    if name in boolean_fields:
        return coerce_boolean(value)
    if name in number_fields:
        return coerce_number(value)
    return clean_string(value)
