"""deepdelta exceptions."""

from __future__ import annotations


class DeepDeltaError(Exception):
    """Base class for deepdelta errors."""


class UnsupportedValueError(DeepDeltaError, TypeError):
    """Value is not part of a JSON-like tree."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported value type: {type_name}")
        self.type_name = type_name


class DocumentError(DeepDeltaError):
    """Base class for document loading errors."""


class DocumentReadError(DocumentError):
    """Document could not be read as UTF-8 text."""


class DocumentParseError(DocumentError):
    """Document text is not valid JSON."""

    def __init__(self, message: str, *, source: str, line: int, column: int) -> None:
        super().__init__(message)
        self.source = source
        self.line = line
        self.column = column


class DocumentMismatchError(DeepDeltaError, AssertionError):
    """Expected and actual documents differ."""
