from __future__ import annotations

import pytest

from src.absence_tracker.absence_tracker.core.enums import AbsenceStatus
from src.absence_tracker.absence_tracker.students.model import Student
from src.absence_tracker.absence_tracker.students.view import build_roster_view, format_absences

STUDENTS = [
    Student(id="1", name="Ana", absences=2),
    Student(id="2", name="Juan", absences=20),
    Student(id="3", name="Pedro", absences=19.99),
]


@pytest.mark.parametrize(
    "value, text",
    [(0, "0"), (5.0, "5"), (5.5, "5.5"), (19.99, "19.99"), (0.125, "0.125")],
)
def test_format_absences(value, text):
    assert format_absences(value) == text


def test_view_marks_free_students():
    view = build_roster_view(STUDENTS, "", free_threshold=20)

    assert [(r.name, r.is_free, r.status) for r in view.rows] == [
        ("Ana", False, AbsenceStatus.REGULAR),
        ("Juan", True, AbsenceStatus.FREE),
        ("Pedro", False, AbsenceStatus.REGULAR),
    ]
    assert view.total == 3
    assert view.visible == 3
    assert not view.is_empty


def test_view_applies_filter():
    view = build_roster_view(STUDENTS, " JU ", free_threshold=20)

    assert [r.id for r in view.rows] == ["2"]
    assert view.filter_text == " JU "
    assert view.total == 3


def test_view_empty_state():
    view = build_roster_view(STUDENTS, "zzz")

    assert view.is_empty
    assert view.to_dict()["students"] == []


def test_view_to_dict():
    view = build_roster_view(STUDENTS[:1], "", free_threshold=20)

    assert view.to_dict() == {
        "filter": "",
        "total": 1,
        "visible": 1,
        "free_threshold": 20.0,
        "students": [
            {
                "id": "1",
                "name": "Ana",
                "absences": 2,
                "absences_display": "2",
                "is_free": False,
                "status": "REGULAR",
            }
        ],
    }
