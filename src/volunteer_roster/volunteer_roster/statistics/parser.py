from __future__ import annotations

import re
from typing import Optional, Sequence

from ..common.numbers import clean_cell
from .layout import DEFAULT_LAYOUT, ExportLayout, GroupColumns
from .model import GroupStatRow, LocationStatRow, ParsedExport, SummaryMetrics

Row = list[str]

# Rows end at \n or \r\n only; other control characters stay inside cells.
_LINE_BREAK = re.compile(r"\r?\n")


def split_rows(text: str) -> list[Row]:
    """Tab-separated text -> cleaned rows, all-empty rows dropped."""
    rows: list[Row] = []
    for line in _LINE_BREAK.split(text or ""):
        cells = [clean_cell(c) for c in line.split("\t")]
        if any(cells):
            rows.append(cells)
    return rows


def find_header(rows: Sequence[Row], layout: ExportLayout = DEFAULT_LAYOUT) -> Optional[int]:
    token = layout.vocabulary.header.upper()
    for index, row in enumerate(rows):
        if row and row[0].upper() == token:
            return index
    return None


def _at(row: Row, index: int) -> str:
    return row[index] if 0 <= index < len(row) else ""


def _group_row(row: Row, cols: GroupColumns) -> Optional[GroupStatRow]:
    label = _at(row, cols.label)
    if not label:
        return None
    return GroupStatRow(
        label=label,
        volunteers=_at(row, cols.volunteers),
        active=_at(row, cols.active),
        active_percentage=_at(row, cols.active_percentage),
        arrivals=_at(row, cols.arrivals),
    )


def _fold_metric(metrics: SummaryMetrics, row: Row, layout: ExportLayout) -> None:
    cols, vocab = layout.metric, layout.vocabulary
    kind = _at(row, cols.type).upper()
    if not kind:
        return

    recorded = _at(row, cols.recorded)
    calculated = _at(row, cols.calculated)
    if kind == vocab.metric_volunteers.upper():
        if recorded:
            metrics.volunteer_hours_recorded = recorded
        if calculated:
            metrics.volunteer_hours_calculated = calculated
    elif kind == vocab.metric_children.upper():
        if recorded:
            metrics.children_recorded = recorded
        if calculated:
            metrics.children_calculated = calculated


def _fold_summary(metrics: SummaryMetrics, row: Row, layout: ExportLayout) -> None:
    cols, vocab = layout.summary, layout.vocabulary
    label = _at(row, cols.label)
    if not label:
        return

    value = _at(row, cols.value)
    key = label.upper()
    if key == vocab.summary_volunteers.upper():
        metrics.total_volunteers = value
    elif key == vocab.summary_active.upper():
        metrics.active_volunteers = value
    elif key == vocab.summary_active_percentage.upper():
        metrics.active_percentage = value
    else:
        metrics.extras.append((label, value))


def parse_export(text: str, layout: ExportLayout = DEFAULT_LAYOUT) -> Optional[ParsedExport]:
    """Classify the rows below the header into location/school/grade rows and metrics.

    Returns None only when no header row can be found. One physical row may
    feed several collections, one per block that carries a label.
    """

    rows = split_rows(text)
    header = find_header(rows, layout)
    if header is None:
        return None

    parsed = ParsedExport()
    loc = layout.location
    for row in rows[header + 1:]:
        label = _at(row, loc.label)
        if label:
            parsed.locations.append(
                LocationStatRow(
                    location=label,
                    children=_at(row, loc.children),
                    volunteers=_at(row, loc.volunteers),
                    sessions=_at(row, loc.sessions),
                    children_per_volunteer=_at(row, loc.children_per_volunteer),
                )
            )

        school = _group_row(row, layout.school)
        if school:
            parsed.schools.append(school)

        grade = _group_row(row, layout.grade)
        if grade:
            parsed.grades.append(grade)

        _fold_metric(parsed.metrics, row, layout)
        _fold_summary(parsed.metrics, row, layout)

    return parsed
