from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .core.constants import DEFAULT_FREE_THRESHOLD, DEFAULT_STORAGE_FILE, DEFAULT_STORAGE_KEY
from .core.enums import StorageBackend
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection
from .database.mysql_kv_store import MySQLKeyValueStore
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.kv_store import KeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .students.kv_student_repository import KeyValueStudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    students_repo: KeyValueStudentRepository
    roster_service: RosterService


def build_store(
    backend: StorageBackend | str,
    *,
    storage_path: str | Path = DEFAULT_STORAGE_FILE,
    db_config: Optional[dict] = None,
) -> KeyValueStore:
    try:
        backend = StorageBackend(str(getattr(backend, "value", backend)).lower())
    except ValueError:
        raise ValidationError(f"Backend de almacenamiento no soportado: {backend!r}")

    if backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStore()
    if backend == StorageBackend.MYSQL:
        if not db_config:
            raise ValidationError("STORAGE_BACKEND=mysql requiere DB_CONFIG")
        return MySQLKeyValueStore(DatabaseConnection.from_dict(db_config))
    return JsonFileKeyValueStore(storage_path)


def build_container(
    *,
    store: Optional[KeyValueStore] = None,
    storage_backend: StorageBackend | str = StorageBackend.JSON,
    storage_path: str | Path = DEFAULT_STORAGE_FILE,
    storage_key: str = DEFAULT_STORAGE_KEY,
    free_threshold: float = DEFAULT_FREE_THRESHOLD,
    db_config: Optional[dict] = None,
) -> Container:
    if store is None:
        store = build_store(storage_backend, storage_path=storage_path, db_config=db_config)

    students_repo = KeyValueStudentRepository(store, key=storage_key)
    roster_service = RosterService(students_repo, free_threshold=free_threshold)

    return Container(
        store=store,
        students_repo=students_repo,
        roster_service=roster_service,
    )


def build_container_from_settings(settings: Any) -> Container:
    return build_container(
        storage_backend=getattr(settings, "STORAGE_BACKEND", StorageBackend.JSON.value),
        storage_path=getattr(settings, "STORAGE_PATH", DEFAULT_STORAGE_FILE),
        storage_key=getattr(settings, "STORAGE_KEY", DEFAULT_STORAGE_KEY),
        free_threshold=float(getattr(settings, "FREE_THRESHOLD", DEFAULT_FREE_THRESHOLD)),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
