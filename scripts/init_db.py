from __future__ import annotations

import argparse
import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.time_clock.time_clock.storage.bootstrap import ensure_database
from src.time_clock.time_clock.storage.json_file import JsonFileDatabase, StoreConfig, resolve_path


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the JSON user database if it is missing.")
    parser.add_argument("--empty", action="store_true", help="do not seed the default users")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    store_config = dict(settings.STORE_CONFIG)
    path = resolve_path(store_config.get("path"), base=REPO_ROOT)

    database = JsonFileDatabase.get_instance(StoreConfig(path=path))
    created = ensure_database(database, seed_default_users=not args.empty)
    if created:
        print(f"OK: Created {path} (users={len(database.read())})")
    else:
        print(f"OK: {path} already exists, left untouched")


if __name__ == "__main__":
    main()
