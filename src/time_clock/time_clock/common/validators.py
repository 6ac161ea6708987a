from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_input_datetime

E = TypeVar("E", bound=Enum)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_optional_int(value: Optional[str], field_name: str, *, default: int = 0) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")


def parse_optional_bool(value: Optional[str], field_name: str, *, default: bool = False) -> bool:
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise ValidationError(f"{field_name} must be true or false")


def parse_optional_datetime(value: Optional[str], field_name: str) -> Optional[datetime]:
    if value is None or not value.strip():
        return None
    try:
        return parse_input_datetime(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must use the format YYYY-MM-DD HH:MM")


def parse_optional_enum(value: Optional[str], enum_cls: Type[E], field_name: str) -> Optional[E]:
    if value is None or not value.strip():
        return None
    try:
        return enum_cls(value.strip())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
