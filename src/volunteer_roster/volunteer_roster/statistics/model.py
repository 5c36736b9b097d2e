from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LocationStatRow:
    location: str
    children: str = ""
    volunteers: str = ""
    sessions: str = ""
    children_per_volunteer: str = ""


@dataclass(frozen=True)
class GroupStatRow:
    """One school or grade row of the export."""

    label: str
    volunteers: str = ""
    active: str = ""
    active_percentage: str = ""
    arrivals: str = ""


@dataclass
class SummaryMetrics:
    """Running aggregate values folded from tagged rows; last non-empty value wins."""

    volunteer_hours_recorded: Optional[str] = None
    volunteer_hours_calculated: Optional[str] = None
    children_recorded: Optional[str] = None
    children_calculated: Optional[str] = None
    total_volunteers: Optional[str] = None
    active_volunteers: Optional[str] = None
    active_percentage: Optional[str] = None
    extras: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class ParsedExport:
    locations: list[LocationStatRow] = field(default_factory=list)
    schools: list[GroupStatRow] = field(default_factory=list)
    grades: list[GroupStatRow] = field(default_factory=list)
    metrics: SummaryMetrics = field(default_factory=SummaryMetrics)


@dataclass(frozen=True)
class SummaryCard:
    label: str
    value: str
    delta: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"label": self.label, "value": self.value}
        if self.delta is not None:
            out["delta"] = self.delta
        return out
