from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Persistence interface for the roster.

    Note (DIP): RosterService depends on this interface, never on a concrete
    store. Implementations keep no copy of the roster between calls.
    """

    def load(self) -> list[Student]:
        """Return the stored roster; never raises, empty on bad data."""

        raise NotImplementedError

    def save(self, students: Sequence[Student]) -> None:
        """Overwrite the stored roster with ``students``."""

        raise NotImplementedError
