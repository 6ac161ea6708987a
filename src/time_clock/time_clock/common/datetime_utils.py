from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import INPUT_DATE_FORMAT


class Clock:
    """Source of the current time.

    Note: Wrapped so tests can inject a fixed clock instead of patching datetime.
    """

    def now(self) -> datetime:
        return datetime.now()


def parse_input_datetime(value: str) -> datetime:
    """Parse 'YYYY-MM-DD HH:MM' query values into datetime."""
    return datetime.strptime(value, INPUT_DATE_FORMAT)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def from_iso(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None
