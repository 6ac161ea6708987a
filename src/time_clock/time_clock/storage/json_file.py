from __future__ import annotations

import json
import logging
import os
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from ..core.constants import DEFAULT_USERS_DB_PATH
from ..core.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class StoreConfig:
    path: Path


class JsonFileDatabase:
    """Single JSON file holding the whole user collection.

    Note: One instance per file path, shared by every repository that touches it,
    so the lock actually covers all writers in the process.
    """

    _instances: Dict[Path, "JsonFileDatabase"] = {}
    _instances_lock = threading.Lock()

    def __init__(self, config: StoreConfig):
        self._config = config
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls, config: StoreConfig) -> "JsonFileDatabase":
        key = Path(config.path).resolve()
        with cls._instances_lock:
            if key not in cls._instances:
                cls._instances[key] = JsonFileDatabase(StoreConfig(path=key))
            return cls._instances[key]

    @property
    def path(self) -> Path:
        return Path(self._config.path)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageUnavailableError(f"Cannot read user database {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise StorageUnavailableError(f"User database {self.path} is not a JSON object")
        return data

    def write(self, records: Dict[str, Any]) -> None:
        """Write the collection atomically (temp file + os.replace)."""

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageUnavailableError(f"Cannot write user database {self.path}: {exc}") from exc
        logger.debug("wrote %d user records to %s", len(records), self.path)


@contextmanager
def db_transaction(database: JsonFileDatabase) -> Iterator[Dict[str, Any]]:
    """Locked read-modify-write of the whole collection.

    The records are written back only when the block exits normally.
    """

    with database.lock:
        records = database.read()
        yield records
        database.write(records)


@contextmanager
def db_snapshot(database: JsonFileDatabase) -> Iterator[Dict[str, Any]]:
    with database.lock:
        yield database.read()


def resolve_path(value: Optional[str], *, base: Optional[Path] = None) -> Path:
    path = Path(value or DEFAULT_USERS_DB_PATH)
    if not path.is_absolute() and base is not None:
        path = base / path
    return path
