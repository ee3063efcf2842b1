from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Student:
    """Entidad de dominio: Alumno.

    Note: plain data object, no storage access.
    """

    id: str
    name: str
    absences: float = 0.0

    def with_absences(self, absences: float) -> "Student":
        return replace(self, absences=float(absences))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "absences": self.absences}
