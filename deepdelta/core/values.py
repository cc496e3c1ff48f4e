"""Classification and comparison of JSON-like values."""

from __future__ import annotations

import math
from typing import Any

from deepdelta.core.types import ValueKind
from deepdelta.exceptions import UnsupportedValueError


def kind_of(value: Any) -> ValueKind:
    """Return the value kind, raising for objects outside the JSON data model."""
    if value is None:
        return "null"
    # bool is an int subclass and must be classified first.
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise UnsupportedValueError(f"dict key {type(key).__name__}")
        return "object"
    raise UnsupportedValueError(type(value).__name__)


def same_kind(left: Any, right: Any) -> bool:
    return kind_of(left) == kind_of(right)


def values_equal(left: Any, right: Any) -> bool:
    """Compare two primitives of the same kind.

    Numbers compare by value, so ``1`` equals ``1.0``. NaN equals NaN.
    """
    if isinstance(left, float) and isinstance(right, float):
        if math.isnan(left) and math.isnan(right):
            return True
    return left == right
