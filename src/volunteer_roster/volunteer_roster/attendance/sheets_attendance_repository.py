from __future__ import annotations

import logging
from typing import Any, List, Sequence

from ..common.datetime_utils import format_display_date
from ..common.numbers import clean_cell
from ..common.validators import join_names, split_names
from ..core.constants import ATTENDANCE_COLUMNS, ATTENDANCE_HEADER
from ..core.exceptions import RangeNotFoundError
from ..sheets.connection import SheetsConnection
from ..sheets.sheets_base import a1_range, add_sheet, append_rows, read_range, sheet_titles
from .model import AttendanceEntry, NewAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DATE, LOCATION, CHILDREN, VOLUNTEER_COUNT, VOLUNTEERS = range(5)


def _cell(row: Sequence[Any], index: int) -> str:
    return clean_cell(row[index]) if index < len(row) else ""


def row_to_entry(row: Sequence[Any]) -> AttendanceEntry:
    return AttendanceEntry(
        date=_cell(row, DATE),
        location=_cell(row, LOCATION),
        children_count=_cell(row, CHILDREN),
        volunteer_count=_cell(row, VOLUNTEER_COUNT),
        volunteers=tuple(split_names(_cell(row, VOLUNTEERS))),
    )


def entry_to_row(entry: NewAttendance) -> list[str]:
    return [
        format_display_date(entry.session_date),
        entry.location,
        entry.children_count,
        entry.volunteer_count,
        join_names(entry.volunteers),
    ]


class SheetsAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: SheetsConnection, *, sheet: str):
        self._conn = conn
        self._sheet = sheet

    def ensure_sheet(self) -> bool:
        # Check-then-create; a concurrent creator makes addSheet fail upstream.
        if self._sheet in sheet_titles(self._conn):
            return False

        logger.info("Attendance sheet %r missing, creating it", self._sheet)
        add_sheet(self._conn, self._sheet)
        append_rows(self._conn, a1_range(self._sheet, "A1:E1"), [ATTENDANCE_HEADER])
        return True

    def append(self, entry: NewAttendance) -> None:
        append_rows(self._conn, a1_range(self._sheet, ATTENDANCE_COLUMNS), [entry_to_row(entry)])

    def list_all(self) -> List[AttendanceEntry]:
        try:
            rows = read_range(self._conn, a1_range(self._sheet, "A2:E"))
        except RangeNotFoundError:
            logger.info("Attendance sheet %r does not exist yet", self._sheet)
            return []
        return [row_to_entry(row) for row in rows if len(row) > 0]
