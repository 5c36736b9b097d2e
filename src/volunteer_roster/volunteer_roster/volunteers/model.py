from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VolunteerRecord:
    """Domain entity: one registered volunteer from the roster sheet.

    Note: Read-only. The roster is maintained by hand in the spreadsheet.
    """

    name: str
    school: str = ""
    grade: str = ""
    locations: tuple[str, ...] = field(default_factory=tuple)
    phone: str = ""
    hours: float = 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "school": self.school,
            "grade": self.grade,
            "location": ", ".join(self.locations),
            "locations": list(self.locations),
            "phone": self.phone,
            "hours": self.hours,
        }
