"""Data models for value tree differences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Literal

from deepdelta.core.values import same_kind

DifferenceStatus = Literal["changed", "type_changed", "removed", "added"]

DIFFERENCE_STATUSES: tuple[str, ...] = ("changed", "type_changed", "removed", "added")


class _MissingType:
    """Marker for the side of a difference that holds no value.

    Distinct from ``None``, which is the JSON ``null`` value.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_MissingType":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_MissingType":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _MissingType()


@dataclass(frozen=True, slots=True)
class Difference:
    """A single disagreement between two value trees at a path."""

    path: str
    before: Any = MISSING
    after: Any = MISSING

    def __post_init__(self) -> None:
        if self.before is MISSING and self.after is MISSING:
            raise ValueError(f"Difference at {self.path!r} has neither before nor after")

    @property
    def status(self) -> DifferenceStatus:
        if self.before is MISSING:
            return "added"
        if self.after is MISSING:
            return "removed"
        if not same_kind(self.before, self.after):
            return "type_changed"
        return "changed"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "path": self.path,
            "status": self.status,
        }
        if self.before is not MISSING:
            payload["before"] = self.before
        if self.after is not MISSING:
            payload["after"] = self.after
        return payload


@dataclass(slots=True)
class DiffResult:
    """Ordered differences between an old and a new document."""

    differences: list[Difference] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.differences)

    def __iter__(self) -> Iterator[Difference]:
        return iter(self.differences)

    @property
    def identical(self) -> bool:
        return not self.differences

    def summary(self) -> dict[str, int]:
        counts = {status: 0 for status in DIFFERENCE_STATUSES}
        for difference in self.differences:
            counts[difference.status] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "identical": self.identical,
            "summary": self.summary(),
            "differences": [difference.to_dict() for difference in self.differences],
        }
