"""Stable public API surface for deepdelta.

Structural diffs of JSON-like value trees:

    >>> from deepdelta import diff
    >>> diff({"name": "Alice"}, {"name": "Bob"})[0].path
    'name'
"""

from deepdelta.differ import (
    MISSING,
    AssertionResult,
    DiffResult,
    Difference,
    DifferenceStatus,
    assert_documents,
    diff,
    diff_documents,
)
from deepdelta.exceptions import (
    DeepDeltaError,
    DocumentError,
    DocumentMismatchError,
    DocumentParseError,
    DocumentReadError,
    UnsupportedValueError,
)
from deepdelta.io import load_document, parse_document

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MISSING",
    "Difference",
    "DifferenceStatus",
    "DiffResult",
    "AssertionResult",
    "diff",
    "diff_documents",
    "assert_documents",
    "load_document",
    "parse_document",
    "DeepDeltaError",
    "UnsupportedValueError",
    "DocumentError",
    "DocumentReadError",
    "DocumentParseError",
    "DocumentMismatchError",
]
