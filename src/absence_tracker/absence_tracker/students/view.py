from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.constants import DEFAULT_FREE_THRESHOLD
from ..core.enums import AbsenceStatus
from .model import Student


@dataclass(frozen=True)
class StudentRow:
    """Read-model for one rendered student."""

    id: str
    name: str
    absences: float
    absences_display: str
    is_free: bool
    status: AbsenceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "absences": self.absences,
            "absences_display": self.absences_display,
            "is_free": self.is_free,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class RosterView:
    rows: tuple[StudentRow, ...]
    filter_text: str
    total: int
    free_threshold: float

    @property
    def visible(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dict(self) -> dict:
        return {
            "filter": self.filter_text,
            "total": self.total,
            "visible": self.visible,
            "free_threshold": self.free_threshold,
            "students": [r.to_dict() for r in self.rows],
        }


def format_absences(value: float) -> str:
    """Compact decimal text: 5.0 -> '5', 5.5 -> '5.5'."""

    text = f"{float(value):.6f}".rstrip("0").rstrip(".")
    return text or "0"


def matches_filter(student: Student, filter_text: str) -> bool:
    return (filter_text or "").strip().lower() in student.name.lower()


def build_roster_view(
    students: Sequence[Student],
    filter_text: str,
    *,
    free_threshold: float = DEFAULT_FREE_THRESHOLD,
) -> RosterView:
    rows = []
    for s in students:
        if not matches_filter(s, filter_text):
            continue
        is_free = s.absences >= free_threshold
        rows.append(
            StudentRow(
                id=s.id,
                name=s.name,
                absences=s.absences,
                absences_display=format_absences(s.absences),
                is_free=is_free,
                status=AbsenceStatus.FREE if is_free else AbsenceStatus.REGULAR,
            )
        )
    return RosterView(
        rows=tuple(rows),
        filter_text=filter_text or "",
        total=len(students),
        free_threshold=float(free_threshold),
    )
