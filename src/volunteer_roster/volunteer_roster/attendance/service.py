from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_attendance_date, year_of_display_date
from ..common.numbers import number_or_zero
from ..common.validators import optional_text, require_non_empty, split_names
from .model import AttendanceEntry, NewAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record sessions and read the attendance log."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    @staticmethod
    def validate(payload: dict[str, Any]) -> NewAttendance:
        """Turn a raw request body into a NewAttendance or raise ValidationError."""
        session_date = parse_attendance_date(optional_text(payload.get("selectedDate")))
        location = require_non_empty(payload.get("location"), "Location")
        return NewAttendance(
            session_date=session_date,
            location=location,
            children_count=optional_text(payload.get("childrenCount")),
            volunteer_count=optional_text(payload.get("volunteerCount")),
            volunteers=tuple(split_names(payload.get("selected"))),
        )

    def record(self, payload: dict[str, Any]) -> NewAttendance:
        entry = self.validate(payload)
        self._attendance.ensure_sheet()
        self._attendance.append(entry)
        logger.info(
            "Attendance recorded: %s at %s (%d volunteers)",
            entry.session_date.isoformat(), entry.location, len(entry.volunteers),
        )
        return entry

    def list_entries(self, *, location: Optional[str] = None, year: Optional[str] = None) -> list[AttendanceEntry]:
        location_n = (location or "").strip().lower()
        year_n = (year or "").strip()

        rows = []
        for e in self._attendance.list_all():
            if location_n and e.location.lower() != location_n:
                continue
            if year_n and year_of_display_date(e.date) != year_n:
                continue
            rows.append(e)
        return rows

    def summary(self) -> dict:
        entries = self._attendance.list_all()
        return {
            "eventsCount": len(entries),
            "totalChildren": int(sum(number_or_zero(e.children_count) for e in entries)),
        }
