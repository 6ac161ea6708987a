"""Back up the JSON user database.

Note: Copies the file into `backups/` with a timestamp; the original is not modified.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.time_clock.time_clock.storage.json_file import JsonFileDatabase, StoreConfig, resolve_path


def backup_database(database: JsonFileDatabase, out_dir: Path, *, now: datetime | None = None) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{database.path.stem}_{ts}.json"

    # Hold the store lock so the copy never sees a half-written file.
    with database.lock:
        if not database.exists():
            raise SystemExit(f"Cannot find {database.path}. Run scripts/init_db.py first.")
        shutil.copy2(database.path, out_file)
    return out_file


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    path = resolve_path(settings.STORE_CONFIG.get("path"), base=REPO_ROOT)

    out_file = backup_database(JsonFileDatabase.get_instance(StoreConfig(path=path)), REPO_ROOT / "backups")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
