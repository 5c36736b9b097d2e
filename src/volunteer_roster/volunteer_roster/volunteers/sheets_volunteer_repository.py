from __future__ import annotations

import logging
from typing import Any, List, Sequence

from ..common.numbers import clean_cell, number_or_zero
from ..common.validators import split_names
from ..sheets.connection import SheetsConnection
from ..sheets.sheets_base import read_range
from .model import VolunteerRecord
from .repository import VolunteerRepository

logger = logging.getLogger(__name__)

# Column order of the roster range.
NAME, SCHOOL, GRADE, LOCATIONS, PHONE, HOURS = range(6)


def _cell(row: Sequence[Any], index: int) -> str:
    return clean_cell(row[index]) if index < len(row) else ""


def row_to_volunteer(row: Sequence[Any]) -> VolunteerRecord:
    return VolunteerRecord(
        name=_cell(row, NAME),
        school=_cell(row, SCHOOL),
        grade=_cell(row, GRADE),
        locations=tuple(split_names(_cell(row, LOCATIONS))),
        phone=_cell(row, PHONE),
        hours=number_or_zero(_cell(row, HOURS)),
    )


class SheetsVolunteerRepository(VolunteerRepository):
    def __init__(self, conn: SheetsConnection, *, range_name: str):
        self._conn = conn
        self._range = range_name

    def list_all(self) -> List[VolunteerRecord]:
        rows = read_range(self._conn, self._range)

        result: List[VolunteerRecord] = []
        seen: set[str] = set()
        for row in rows:
            if not row or not _cell(row, NAME):
                continue
            volunteer = row_to_volunteer(row)
            if volunteer.name in seen:
                logger.warning("Duplicate roster name %r skipped", volunteer.name)
                continue
            seen.add(volunteer.name)
            result.append(volunteer)
        return result
