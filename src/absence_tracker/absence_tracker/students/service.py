from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.numeric_utils import clamp_non_negative, parse_decimal
from ..common.validators import require_name, require_student_id
from ..core.constants import DEFAULT_FREE_THRESHOLD
from ..core.exceptions import DuplicateIdError, DuplicateNameError, StudentNotFoundError
from .model import Student
from .repository import StudentRepository
from .view import RosterView, build_roster_view, matches_filter

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: keep the roster of students and their absence counts.

    The roster is loaded once on construction; every successful mutation is
    written through to the repository before returning.
    """

    def __init__(self, students: StudentRepository, *, free_threshold: float = DEFAULT_FREE_THRESHOLD):
        self._repo = students
        self._free_threshold = float(free_threshold)
        self._students: list[Student] = list(students.load())
        self._filter = ""
        logger.info("Loaded roster with %d students", len(self._students))

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    @property
    def filter(self) -> str:
        return self._filter

    @property
    def free_threshold(self) -> float:
        return self._free_threshold

    @property
    def is_empty(self) -> bool:
        return not self._students

    def get(self, student_id: str) -> Optional[Student]:
        for s in self._students:
            if s.id == student_id:
                return s
        return None

    def is_name_taken(self, name: str) -> bool:
        wanted = name.strip().lower()
        return any(s.name.lower() == wanted for s in self._students)

    def validate_new_name(self, name: str) -> str:
        name = require_name(name)
        if self.is_name_taken(name):
            raise DuplicateNameError("Ya existe un alumno con ese nombre.")
        return name

    def add_student(self, name: str, student_id: str) -> Student:
        name = self.validate_new_name(name)
        student_id = require_student_id(student_id)
        if self.get(student_id) is not None:
            raise DuplicateIdError("Ese ID ya está en uso.")

        student = Student(id=student_id, name=name, absences=0.0)
        self._commit(self._students + [student])
        logger.info("Added student %r (%s)", student.name, student.id)
        return student

    def update_absences(self, student_id: str, raw_value: Any) -> Optional[Student]:
        """Set a student's absences from numeric or text input.

        Unknown ids are ignored and return None.
        """

        absences = clamp_non_negative(parse_decimal(raw_value))
        for idx, s in enumerate(self._students):
            if s.id == student_id:
                updated = s.with_absences(absences)
                students = list(self._students)
                students[idx] = updated
                self._commit(students)
                logger.info("Absences of %s set to %s", student_id, absences)
                return updated
        return None

    def increment_absences(self, student_id: str) -> Optional[Student]:
        current = self.get(student_id)
        if current is None:
            return None
        return self.update_absences(student_id, current.absences + 1)

    def decrement_absences(self, student_id: str) -> Optional[Student]:
        current = self.get(student_id)
        if current is None:
            return None
        return self.update_absences(student_id, current.absences - 1)

    def reset_absences(self, student_id: str) -> Optional[Student]:
        return self.update_absences(student_id, 0)

    def delete_student(self, student_id: str) -> Student:
        student = self.get(student_id)
        if student is None:
            raise StudentNotFoundError("El alumno no existe.")

        self._commit([s for s in self._students if s.id != student_id])
        logger.info("Deleted student %r (%s)", student.name, student.id)
        return student

    def clear_all(self) -> None:
        removed = len(self._students)
        self._commit([])
        logger.info("Cleared roster (%d students removed)", removed)

    def set_filter(self, text: str) -> None:
        self._filter = text

    def visible_students(self) -> list[Student]:
        return [s for s in self._students if matches_filter(s, self._filter)]

    def is_free(self, student: Student) -> bool:
        return student.absences >= self._free_threshold

    def view(self) -> RosterView:
        return build_roster_view(self._students, self._filter, free_threshold=self._free_threshold)

    def _commit(self, students: list[Student]) -> None:
        # Swap in the new roster only once it is stored.
        self._repo.save(students)
        self._students = students
