"""Column layout of the published statistics export.

The export is maintained by hand in a separate spreadsheet; every positional
offset used by the parser lives here so a layout change touches one table.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocationColumns:
    label: int = 0
    children: int = 1
    volunteers: int = 2
    sessions: int = 3
    children_per_volunteer: int = 4


@dataclass(frozen=True)
class GroupColumns:
    """School and grade blocks share one shape."""

    label: int
    volunteers: int
    active: int
    active_percentage: int
    arrivals: int


@dataclass(frozen=True)
class MetricColumns:
    type: int = 18
    recorded: int = 19
    calculated: int = 20


@dataclass(frozen=True)
class SummaryColumns:
    label: int = 22
    value: int = 23


@dataclass(frozen=True)
class Vocabulary:
    """Source-language tokens, compared case-insensitively."""

    header: str = "LOKACIJA"
    metric_volunteers: str = "VOLONTERI"
    metric_children: str = "DJECA"
    summary_volunteers: str = "VOLONTERI"
    summary_active: str = "AKTIVNI VOLONTERI"
    summary_active_percentage: str = "POSTOTAK AKTIVNIH"


@dataclass(frozen=True)
class ExportLayout:
    location: LocationColumns = field(default_factory=LocationColumns)
    school: GroupColumns = field(default_factory=lambda: GroupColumns(6, 7, 8, 9, 10))
    grade: GroupColumns = field(default_factory=lambda: GroupColumns(12, 13, 14, 15, 16))
    metric: MetricColumns = field(default_factory=MetricColumns)
    summary: SummaryColumns = field(default_factory=SummaryColumns)
    vocabulary: Vocabulary = field(default_factory=Vocabulary)


DEFAULT_LAYOUT = ExportLayout()
