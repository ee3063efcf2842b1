from __future__ import annotations

from enum import Enum


class AbsenceStatus(str, Enum):
    """Estado derivado del alumno según su cantidad de faltas."""

    REGULAR = "REGULAR"
    FREE = "FREE"


class StorageBackend(str, Enum):
    """Backends de almacenamiento clave/valor soportados."""

    JSON = "json"
    MEMORY = "memory"
    MYSQL = "mysql"
