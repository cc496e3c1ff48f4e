"""Differ subsystem for deepdelta."""

from deepdelta.differ.assertion import AssertionResult, assert_documents
from deepdelta.differ.engine import diff, diff_documents
from deepdelta.differ.formatting import (
    render_diff_summary,
    render_difference,
    render_differences,
    render_value,
)
from deepdelta.differ.models import (
    DIFFERENCE_STATUSES,
    MISSING,
    DiffResult,
    Difference,
    DifferenceStatus,
)

__all__ = [
    "MISSING",
    "DifferenceStatus",
    "DIFFERENCE_STATUSES",
    "Difference",
    "DiffResult",
    "diff",
    "diff_documents",
    "AssertionResult",
    "assert_documents",
    "render_value",
    "render_difference",
    "render_diff_summary",
    "render_differences",
]
