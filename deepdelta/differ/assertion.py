"""Assertion helpers for test and CI regression checks."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from deepdelta.differ.engine import diff_documents
from deepdelta.differ.formatting import render_diff_summary, render_differences
from deepdelta.differ.models import DiffResult
from deepdelta.exceptions import DocumentMismatchError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssertionResult:
    """Outcome of an expected vs actual document assertion."""

    diff: DiffResult

    @property
    def passed(self) -> bool:
        return self.diff.identical

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def render(self, *, max_changes: int = 8) -> str:
        return f"{render_diff_summary(self.diff)}\n{render_differences(self.diff, max_changes=max_changes)}"

    def raise_for_differences(self, *, max_changes: int = 8) -> None:
        """Raise ``DocumentMismatchError`` when the documents differ."""
        if self.passed:
            return
        raise DocumentMismatchError(
            f"documents differ\n{self.render(max_changes=max_changes)}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            **self.diff.to_dict(),
        }


def assert_documents(expected: Any, actual: Any) -> AssertionResult:
    """Compare expected vs actual and return assertion outcome."""
    result = AssertionResult(diff=diff_documents(expected, actual))
    if not result.passed:
        logger.info("assertion failed: %s", render_diff_summary(result.diff))
    return result
