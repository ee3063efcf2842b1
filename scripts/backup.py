"""Backup the stored roster.

Note: copies the raw blob as stored, so even a roster the app would reject on
load is preserved for manual inspection.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.absence_tracker.absence_tracker.container import build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        storage_path=settings.STORAGE_PATH,
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    raw = store.get_item(settings.STORAGE_KEY)
    if raw is None:
        raise SystemExit(f"No hay datos guardados bajo {settings.STORAGE_KEY!r}.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"roster_{ts}.json"
    out_file.write_text(raw, encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
