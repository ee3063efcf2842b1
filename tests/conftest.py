from __future__ import annotations

import pytest

from src.absence_tracker.absence_tracker.students.kv_student_repository import KeyValueStudentRepository
from src.absence_tracker.absence_tracker.students.model import Student
from src.absence_tracker.absence_tracker.students.service import RosterService
from src.absence_tracker.absence_tracker.storage.memory_store import InMemoryKeyValueStore

STORAGE_KEY = "escuela:faltas:v1"


class RecordingRepo:
    """In-memory StudentRepository that remembers every save."""

    def __init__(self, students=None):
        self.stored: list[Student] = list(students or [])
        self.saves: list[list[Student]] = []

    def load(self) -> list[Student]:
        return list(self.stored)

    def save(self, students) -> None:
        self.stored = list(students)
        self.saves.append(list(students))


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def repo(store):
    return KeyValueStudentRepository(store, key=STORAGE_KEY)


@pytest.fixture
def recording_repo():
    return RecordingRepo()


@pytest.fixture
def roster(recording_repo):
    return RosterService(recording_repo)


@pytest.fixture
def seeded_roster():
    repo = RecordingRepo(
        [
            Student(id="1", name="Ana", absences=2),
            Student(id="2", name="Juan", absences=20),
            Student(id="3", name="Pedro", absences=19.99),
            Student(id="4", name="Mariana", absences=0),
        ]
    )
    return RosterService(repo), repo
