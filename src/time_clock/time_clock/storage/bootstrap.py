from __future__ import annotations

import logging
from typing import Dict, List

from ..core.enums import Role
from ..users.codec import user_to_dict
from ..users.model import User
from .json_file import JsonFileDatabase

logger = logging.getLogger(__name__)


def build_default_users() -> List[User]:
    """Demo accounts written into a brand-new database."""

    return [
        User(user_id="123", name="Anna", role=Role.NON_ADMINISTRATOR),
        User(user_id="1234", name="Bob", role=Role.ADMINISTRATOR),
        User(user_id="987654321", name="Charlie", role=Role.NON_ADMINISTRATOR),
    ]


def ensure_database(database: JsonFileDatabase, *, seed_default_users: bool = True) -> bool:
    """Create the database file if it does not exist yet.

    Returns True when a new file was written. An existing file is never touched.
    """

    with database.lock:
        if database.exists():
            return False

        records: Dict[str, dict] = {}
        if seed_default_users:
            records = {u.user_id: user_to_dict(u) for u in build_default_users()}
        database.write(records)

    logger.info("created user database %s (%d users)", database.path, len(records))
    return True
