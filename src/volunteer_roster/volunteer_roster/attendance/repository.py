from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry, NewAttendance


class AttendanceRepository(Protocol):
    def ensure_sheet(self) -> bool:
        """Create the attendance sheet with its header row if missing.

        Returns True when the sheet had to be created.
        """

        raise NotImplementedError

    def append(self, entry: NewAttendance) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceEntry]:
        raise NotImplementedError
