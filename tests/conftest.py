from __future__ import annotations

import os
import re
from types import SimpleNamespace
from typing import Optional

import pytest
from googleapiclient.errors import HttpError

os.environ.setdefault("APP_ENV", "testing")

from src.volunteer_roster.volunteer_roster import create_app
from src.volunteer_roster.volunteer_roster.attendance.model import AttendanceEntry, NewAttendance
from src.volunteer_roster.volunteer_roster.container import build_services
from src.volunteer_roster.volunteer_roster.core.exceptions import AuthenticationError
from src.volunteer_roster.volunteer_roster.volunteers.model import VolunteerRecord


# ---------------------------------------------------------------------------
# Fake Sheets API, same call chain as googleapiclient:
# service.spreadsheets().values().get(...).execute()
# ---------------------------------------------------------------------------


def _split_range(range_name: str) -> tuple[str, int]:
    title, _, cells = range_name.rpartition("!")
    if title.startswith("'") and title.endswith("'"):
        title = title[1:-1].replace("''", "'")
    m = re.match(r"[A-Z]+(\d*)", cells)
    start = int(m.group(1)) if m and m.group(1) else 1
    return title, start


class _Request:
    def __init__(self, fn):
        self._fn = fn

    def execute(self):
        return self._fn()


class FakeWorkbook:
    def __init__(self, sheets: Optional[dict[str, list[list[str]]]] = None):
        self.sheets: dict[str, list[list[str]]] = {k: [list(r) for r in v] for k, v in (sheets or {}).items()}
        self.calls: list[tuple[str, str]] = []

    def missing(self, range_name: str) -> HttpError:
        content = ('{"error": {"code": 400, "message": "Unable to parse range: %s"}}' % range_name).encode()
        return HttpError(SimpleNamespace(status=400, reason="Bad Request"), content)

    def spreadsheets(self):
        return self

    def values(self):
        return _Values(self)

    def get(self, spreadsheetId, fields=None):
        self.calls.append(("get_spreadsheet", spreadsheetId))
        return _Request(lambda: {"sheets": [{"properties": {"title": t}} for t in self.sheets]})

    def batchUpdate(self, spreadsheetId, body):
        def run():
            for req in body["requests"]:
                title = req["addSheet"]["properties"]["title"]
                self.calls.append(("add_sheet", title))
                self.sheets.setdefault(title, [])
            return {}

        return _Request(run)


class _Values:
    def __init__(self, book: FakeWorkbook):
        self._book = book

    def get(self, spreadsheetId, range):
        def run():
            self._book.calls.append(("read", range))
            title, start = _split_range(range)
            if title not in self._book.sheets:
                raise self._book.missing(range)
            rows = self._book.sheets[title][start - 1:]
            return {"range": range, "values": rows} if rows else {"range": range}

        return _Request(run)

    def append(self, spreadsheetId, range, valueInputOption, body):
        def run():
            self._book.calls.append(("append", range))
            title, _ = _split_range(range)
            if title not in self._book.sheets:
                raise self._book.missing(range)
            self._book.sheets[title].extend([list(r) for r in body["values"]])
            return {}

        return _Request(run)


class FakeConnection:
    spreadsheet_id = "test-spreadsheet"

    def __init__(self, workbook: FakeWorkbook):
        self.workbook = workbook

    def service(self):
        return self.workbook


# ---------------------------------------------------------------------------
# In-memory repositories for service/API tests
# ---------------------------------------------------------------------------


class InMemoryVolunteers:
    def __init__(self, volunteers: list[VolunteerRecord]):
        self._volunteers = list(volunteers)

    def list_all(self):
        return list(self._volunteers)


class InMemoryAttendance:
    def __init__(self, entries: Optional[list[AttendanceEntry]] = None):
        self.entries = list(entries or [])
        self.appended: list[NewAttendance] = []
        self.ensure_calls = 0

    def ensure_sheet(self) -> bool:
        self.ensure_calls += 1
        return self.ensure_calls == 1

    def append(self, entry: NewAttendance) -> None:
        self.appended.append(entry)

    def list_all(self):
        return list(self.entries)


class StaticExport:
    def __init__(self, text: str = "", error: Optional[Exception] = None):
        self.text = text
        self.error = error

    def fetch_text(self) -> str:
        if self.error:
            raise self.error
        return self.text


class FakeVerifier:
    def __init__(self, *, enabled: bool = False, tokens: Optional[dict[str, str]] = None):
        self.enabled = enabled
        self._tokens = tokens or {}

    def verify(self, token: str) -> str:
        if token not in self._tokens:
            raise AuthenticationError("Invalid bearer token")
        return self._tokens[token]


# ---------------------------------------------------------------------------
# Export text helpers
# ---------------------------------------------------------------------------

EXPORT_WIDTH = 24


def export_row(cells: dict[int, str]) -> str:
    row = [""] * EXPORT_WIDTH
    for index, value in cells.items():
        row[index] = value
    return "\t".join(row)


def export_text(*rows: dict[int, str]) -> str:
    return "\n".join(export_row(r) for r in rows)


@pytest.fixture
def sample_export() -> str:
    """Decorative title, header, mixed data rows and a summary footer."""
    return "\n".join(
        [
            export_row({0: "STATISTIKA PROGRAMA 2025"}),
            "\t\t\t",
            export_row({0: "Lokacija", 6: "ŠKOLA", 12: "RAZRED", 18: "VRSTA", 22: "OPIS"}),
            export_row(
                {
                    0: "Dom Nazorova", 1: "1.204", 2: "310", 3: "40", 4: "3,88",
                    6: "Klasična gimnazija", 7: "25", 8: "18", 9: "72%", 10: "150",
                    12: "1. razred", 13: "20", 14: "12", 15: "60%", 16: "90",
                    18: "VOLONTERI", 19: "480", 20: "500",
                    22: "VOLONTERI", 23: "60",
                }
            ),
            export_row(
                {
                    0: "Dom Zagreb", 1: "800", 2: "200", 3: "35", 4: "4,00",
                    6: "XV. gimnazija", 7: "35", 8: "20", 9: "57%", 10: "210",
                    18: "DJECA", 19: "2.004", 20: "2.004",
                    22: "Aktivni volonteri", 23: "38",
                }
            ),
            export_row({22: "POSTOTAK AKTIVNIH", 23: "63"}),
            export_row({22: "Termini ukupno", 23: "75"}),
        ]
    )


@pytest.fixture
def volunteers() -> list[VolunteerRecord]:
    return [
        VolunteerRecord(name="Marko Horvat", school="XV. gimnazija", grade="3", locations=("Dom Zagreb",), hours=12.0),
        VolunteerRecord(
            name="Ana Kovač",
            school="Klasična gimnazija",
            grade="2",
            locations=("Dom Nazorova", "Dom Zagreb"),
            hours=20.5,
        ),
        VolunteerRecord(name="Ivana Babić", school="XV. gimnazija", grade="2", locations=("Dom Nazorova",), hours=0.0),
    ]


@pytest.fixture
def make_client(volunteers, sample_export):
    def _make(*, attendance=None, export=None, verifier=None, roster=None):
        container = build_services(
            volunteers_repo=InMemoryVolunteers(volunteers if roster is None else roster),
            attendance_repo=attendance if attendance is not None else InMemoryAttendance(),
            export_client=export if export is not None else StaticExport(sample_export),
            token_verifier=verifier if verifier is not None else FakeVerifier(),
        )
        app = create_app(container=container)
        return app.test_client()

    return _make
