from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for report access control."""

    ADMINISTRATOR = "Administrator"
    NON_ADMINISTRATOR = "NonAdministrator"


class BreakType(str, Enum):
    """Kind of break; each kind has its own active slot on a user."""

    BREAK = "Break"
    LUNCH = "Lunch"
