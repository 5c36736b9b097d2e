from __future__ import annotations

import re
from datetime import date, datetime, timezone

from ..core.constants import DISPLAY_DATE_FORMAT
from ..core.exceptions import ValidationError

_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_DMY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def parse_attendance_date(value: str) -> date:
    """Parse dd/mm/yyyy, dd.mm.yyyy or yyyy-mm-dd into a date.

    Trailing separators ("29.11.2025.") and inner whitespace are tolerated.
    """

    raw = (value or "").strip()
    if not raw:
        raise ValidationError("Date is required")

    match = _ISO_RE.match(raw)
    if match:
        year, month, day = match.groups()
    else:
        cleaned = "".join(raw.replace(".", "/").split()).rstrip("/")
        match = _DMY_RE.match(cleaned)
        if not match:
            raise ValidationError(f"Invalid date: {raw!r}")
        day, month, year = match.groups()

    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        raise ValidationError(f"Invalid date: {raw!r}")


def format_display_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def year_of_display_date(value: str) -> str:
    """Year part of a stored date ("29/11/2025" -> "2025"); "" when unknown."""
    try:
        return str(parse_attendance_date(value).year)
    except ValidationError:
        return ""


def now_utc() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)
