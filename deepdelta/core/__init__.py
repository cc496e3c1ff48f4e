"""Value model primitives for deepdelta."""

from deepdelta.core.paths import join_index, join_key
from deepdelta.core.types import PRIMITIVE_KINDS, VALUE_KINDS, ValueKind
from deepdelta.core.values import kind_of, same_kind, values_equal

__all__ = [
    "ValueKind",
    "VALUE_KINDS",
    "PRIMITIVE_KINDS",
    "kind_of",
    "same_kind",
    "values_equal",
    "join_key",
    "join_index",
]
