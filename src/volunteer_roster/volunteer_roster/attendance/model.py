from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class NewAttendance:
    """Validated write-model for one session, before it is stored."""

    session_date: date
    location: str
    children_count: str = ""
    volunteer_count: str = ""
    volunteers: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one recorded session as read back from the sheet.

    Note: Fields are kept as stored (strings); entries are never updated.
    """

    date: str
    location: str = ""
    children_count: str = ""
    volunteer_count: str = ""
    volunteers: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "location": self.location,
            "childrenCount": self.children_count,
            "volunteerCount": self.volunteer_count,
            "volunteers": list(self.volunteers),
        }
