"""CLI-friendly rendering for diff results."""

from __future__ import annotations

import json
from typing import Any

from deepdelta.differ.models import MISSING, DiffResult, Difference

_STATUS_MARKERS = {
    "changed": "~",
    "type_changed": "!",
    "removed": "-",
    "added": "+",
}


def render_value(value: Any) -> str:
    if value is MISSING:
        return "<MISSING>"
    return json.dumps(value, ensure_ascii=True, sort_keys=True, separators=(",", ":"))


def render_difference(difference: Difference) -> str:
    marker = _STATUS_MARKERS[difference.status]
    path = difference.path or "<root>"
    return (
        f"{marker} {path}: "
        f"{render_value(difference.before)} -> {render_value(difference.after)}"
    )


def render_diff_summary(result: DiffResult) -> str:
    summary = result.summary()
    return (
        f"differences={len(result)} "
        f"changed={summary['changed']} type_changed={summary['type_changed']} "
        f"removed={summary['removed']} added={summary['added']}"
    )


def render_differences(result: DiffResult, *, max_changes: int = 8) -> str:
    if result.identical:
        return "no differences detected"

    limit = max(1, max_changes)
    lines = [render_difference(difference) for difference in result.differences[:limit]]

    remaining = len(result) - limit
    if remaining > 0:
        lines.append(f"... {remaining} additional difference(s) omitted")

    return "\n".join(lines)
