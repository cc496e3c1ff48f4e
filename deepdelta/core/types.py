"""Type definitions for deepdelta value trees."""

from typing import Literal

ValueKind = Literal[
    "null",
    "bool",
    "number",
    "string",
    "array",
    "object",
]

VALUE_KINDS: tuple[str, ...] = (
    "null",
    "bool",
    "number",
    "string",
    "array",
    "object",
)

PRIMITIVE_KINDS = frozenset({"null", "bool", "number", "string"})
