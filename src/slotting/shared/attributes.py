"""Scalar attribute values and their explicit coercions.

Queries, contexts and constraints carry free-form attributes. A value is one
of ``str``, ``int``, ``float`` or ``bool``; each reader coerces it to the type
it needs and returns ``None`` when the coercion is not possible. None of the
functions below ever raise. Non-finite numbers (nan, infinities) count as
not coercible.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

type AttributeValue = str | int | float | bool
type Attributes = Mapping[str, AttributeValue]


def as_str(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_float(value: object) -> float | None:
    # bool is an int subclass: reject it explicitly
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    # nan and infinities compare unpredictably
    return number if math.isfinite(number) else None


def as_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        number = as_float(text)
        if number is not None and number.is_integer():
            return int(number)
    return None


def as_bool(value: object) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return None
