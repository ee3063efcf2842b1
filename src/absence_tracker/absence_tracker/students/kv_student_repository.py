from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from ..common.numeric_utils import coerce_number
from ..core.constants import DEFAULT_STORAGE_KEY
from ..storage.kv_store import KeyValueStore
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class KeyValueStudentRepository(StudentRepository):
    """Stores the whole roster as one JSON array under a fixed key."""

    def __init__(self, store: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY):
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Student]:
        try:
            raw = self._store.get_item(self._key)
            if not raw:
                return []
            parsed = json.loads(raw)
        except Exception as e:
            logger.warning("Ignoring unreadable roster under %r: %s", self._key, e)
            return []

        if not isinstance(parsed, list):
            logger.warning("Ignoring roster under %r: expected a JSON array", self._key)
            return []

        try:
            students = [s for s in (self._to_student(item) for item in parsed) if s is not None]
        except Exception as e:
            logger.warning("Ignoring roster under %r: %s", self._key, e)
            return []
        return students

    def save(self, students: Sequence[Student]) -> None:
        payload = json.dumps([s.to_dict() for s in students], ensure_ascii=False)
        self._store.set_item(self._key, payload)

    @staticmethod
    def _to_student(item: Any) -> Optional[Student]:
        if not item or not isinstance(item, dict):
            return None
        return Student(
            id=str(item.get("id", "")),
            name=str(item.get("name", "")),
            absences=coerce_number(item.get("absences")),
        )
