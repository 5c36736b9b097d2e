from __future__ import annotations

from typing import Protocol, Sequence

from .model import VolunteerRecord


class VolunteerRepository(Protocol):
    """Repository interface for the roster.

    Note: The service layer depends on this interface, not on the spreadsheet client.
    """

    def list_all(self) -> Sequence[VolunteerRecord]:
        raise NotImplementedError
