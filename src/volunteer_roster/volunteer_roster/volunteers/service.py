from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .model import VolunteerRecord
from .repository import VolunteerRepository

SORT_DIRECTIONS = ("asc", "desc")


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


class VolunteerService:
    """Use case: browse the roster (search, filter, sort)."""

    def __init__(self, volunteers: VolunteerRepository):
        self._volunteers = volunteers

    def list_volunteers(
        self,
        *,
        search: Optional[str] = None,
        school: Optional[str] = None,
        grade: Optional[str] = None,
        location: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> list[VolunteerRecord]:
        direction = _norm(sort) or "asc"
        if direction not in SORT_DIRECTIONS:
            raise ValidationError(f"Unknown sort direction: {sort!r}")

        needle = _norm(search)
        school_n, grade_n, location_n = _norm(school), _norm(grade), _norm(location)

        rows = []
        for v in self._volunteers.list_all():
            if needle and needle not in v.name.lower() and needle not in v.school.lower():
                continue
            if school_n and _norm(v.school) != school_n:
                continue
            if grade_n and _norm(v.grade) != grade_n:
                continue
            if location_n and location_n not in {_norm(loc) for loc in v.locations}:
                continue
            rows.append(v)

        rows.sort(key=lambda v: v.name.lower(), reverse=direction == "desc")
        return rows

    def filter_options(self) -> dict[str, list[str]]:
        schools: set[str] = set()
        grades: set[str] = set()
        locations: set[str] = set()
        for v in self._volunteers.list_all():
            if v.school:
                schools.add(v.school)
            if v.grade:
                grades.add(v.grade)
            locations.update(v.locations)
        return {
            "schools": sorted(schools, key=str.lower),
            "grades": sorted(grades, key=str.lower),
            "locations": sorted(locations, key=str.lower),
        }

    def overview(self) -> dict:
        volunteers = self._volunteers.list_all()
        return {
            "volunteersCount": len(volunteers),
            "totalHours": round(sum(v.hours for v in volunteers)),
        }
