"""Example: use the service layer without Flask.

Controllers are a thin layer; the roster rules live in RosterService.
"""

from src.absence_tracker.absence_tracker.container import build_container
from src.absence_tracker.absence_tracker.storage.memory_store import InMemoryKeyValueStore


def main():
    container = build_container(store=InMemoryKeyValueStore())
    roster = container.roster_service

    roster.add_student("Ana García", "A001")
    roster.add_student("Bruno Díaz", "A002")
    roster.update_absences("A002", "20,5")

    roster.set_filter("an")
    for row in roster.view().rows:
        print(row.name, row.absences_display, "LIBRE" if row.is_free else "")


if __name__ == "__main__":
    main()
