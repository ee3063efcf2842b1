from __future__ import annotations

from typing import Optional, Protocol

from ..core.exceptions import StudentNotFoundError
from .model import Student
from .service import RosterService


class RosterPrompts(Protocol):
    """Capability supplied by the UI to ask the user things."""

    def ask_student_id(self) -> Optional[str]:
        """Return the id typed by the user, or None if cancelled."""

        raise NotImplementedError

    def confirm(self, message: str) -> bool:
        raise NotImplementedError


class RosterWorkflow:
    """User-facing flows that need an id prompt or a confirmation."""

    def __init__(self, roster: RosterService, prompts: RosterPrompts):
        self._roster = roster
        self._prompts = prompts

    def add_student(self, name: str) -> Optional[Student]:
        # Reject the name before asking for an id.
        name = self._roster.validate_new_name(name)
        student_id = self._prompts.ask_student_id()
        if student_id is None:
            return None
        return self._roster.add_student(name, student_id)

    def delete_student(self, student_id: str) -> Optional[Student]:
        student = self._roster.get(student_id)
        if student is None:
            raise StudentNotFoundError("El alumno no existe.")
        if not self._prompts.confirm(f'¿Eliminar a "{student.name}"? Esta acción no se puede deshacer.'):
            return None
        return self._roster.delete_student(student_id)

    def clear_all(self) -> bool:
        if self._roster.is_empty:
            return False
        if not self._prompts.confirm("¿Borrar todos los alumnos y faltas? No se puede deshacer."):
            return False
        self._roster.clear_all()
        return True
