from __future__ import annotations

from typing import Any, Iterable

from ..core.constants import NAMES_DELIMITER
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise ValidationError(f"{field_name} is required")
    return text.strip()


def optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def split_names(value: Any) -> list[str]:
    """Comma-joined string or list -> trimmed, non-empty names."""
    if value is None:
        return []
    if isinstance(value, str):
        parts: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = value
    else:
        raise ValidationError("Expected a list of names")
    return [str(p).strip() for p in parts if p is not None and str(p).strip()]


def join_names(names: Iterable[str]) -> str:
    return NAMES_DELIMITER.join(names)
