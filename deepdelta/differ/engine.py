"""Recursive structural diff over JSON-like value trees.

Object keys are visited in sorted order on both passes, so the order of
reported differences does not depend on dict insertion order.

A key removed from an object is reported under its bare name, without the
path of the enclosing object. Added keys carry the full path from the root.
"""

from __future__ import annotations

from copy import deepcopy
import logging
from typing import Any

from deepdelta.core.paths import join_index, join_key
from deepdelta.core.types import PRIMITIVE_KINDS
from deepdelta.core.values import kind_of, values_equal
from deepdelta.differ.models import MISSING, DiffResult, Difference

logger = logging.getLogger(__name__)


def diff(old: Any, new: Any) -> list[Difference]:
    """Return the differences between two value trees.

    Reported values are copies and stay valid after the inputs change.
    """
    differences: list[Difference] = []
    _collect_differences(old, new, path="", out=differences)
    return differences


def diff_documents(old: Any, new: Any) -> DiffResult:
    """Diff two documents and wrap the differences in a ``DiffResult``."""
    result = DiffResult(differences=diff(old, new))
    logger.debug("diff completed with %d difference(s)", len(result))
    return result


def _collect_differences(old: Any, new: Any, *, path: str, out: list[Difference]) -> None:
    old_kind = kind_of(old)
    new_kind = kind_of(new)

    if old_kind != new_kind:
        out.append(Difference(path=path, before=deepcopy(old), after=deepcopy(new)))
        return

    if old_kind in PRIMITIVE_KINDS:
        if not values_equal(old, new):
            out.append(Difference(path=path, before=old, after=new))
        return

    if old_kind == "array":
        max_len = max(len(old), len(new))
        for idx in range(max_len):
            # A short array is padded with null.
            old_item = old[idx] if idx < len(old) else None
            new_item = new[idx] if idx < len(new) else None
            _collect_differences(old_item, new_item, path=join_index(path, idx), out=out)
        return

    if old_kind == "object":
        for key in sorted(old):
            if key in new:
                _collect_differences(old[key], new[key], path=join_key(path, key), out=out)
            else:
                out.append(Difference(path=key, before=deepcopy(old[key]), after=MISSING))
        for key in sorted(new):
            if key not in old:
                out.append(
                    Difference(path=join_key(path, key), before=MISSING, after=deepcopy(new[key]))
                )
        return

    raise AssertionError(f"Unhandled value kind: {old_kind}")
