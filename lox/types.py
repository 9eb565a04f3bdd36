"""Runtime value helpers for Lox.

Lox values map directly onto Python objects: numbers are `float`,
strings are `str`, booleans are `bool` and nil is `None`. Python's own
equality does not keep these kinds apart (`0.0 == False` holds), so the
helpers here compare kinds explicitly before comparing values.
"""

from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, float) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        # NaN equals NaN; -0.0 and 0.0 differ
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields an infinity or NaN, not an error."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def stringify(value: Any) -> str:
    """Convert a Lox value to the text shown by a print statement."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        text = repr(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text
    return str(value)
