from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.absence_tracker.absence_tracker.container import build_container_from_settings
from src.absence_tracker.absence_tracker.core.exceptions import ValidationError

DEMO_STUDENTS = [
    ("A001", "Ana García", 3),
    ("A002", "Bruno Díaz", 12.5),
    ("A003", "Carla Méndez", 20),
    ("A004", "Daniel Ruiz", 0),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    roster = build_container_from_settings(settings).roster_service

    added = 0
    for student_id, name, absences in DEMO_STUDENTS:
        try:
            roster.add_student(name, student_id)
        except ValidationError as e:
            print(f"SKIP: {name} ({student_id}): {e}")
            continue
        roster.update_absences(student_id, absences)
        added += 1

    print(f"OK: Seeded {added} students -> storage={settings.STORAGE_BACKEND} (total={len(roster.students)})")


if __name__ == "__main__":
    main()
