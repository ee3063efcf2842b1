from __future__ import annotations

from ..core.exceptions import EmptyIdError, EmptyNameError


def require_name(value: str | None) -> str:
    if value is None or not str(value).strip():
        raise EmptyNameError("Por favor, ingresa un nombre.")
    return str(value).strip()


def require_student_id(value: str | None) -> str:
    if value is None or not str(value).strip():
        raise EmptyIdError("El ID no puede estar vacío.")
    return str(value).strip()
