from __future__ import annotations

from typing import Optional

from ..common.numbers import format_decimal, number_or_zero, parse_number
from .layout import DEFAULT_LAYOUT, ExportLayout
from .model import GroupStatRow, ParsedExport, SummaryCard, SummaryMetrics
from .parser import parse_export

LOCATION_COLUMNS = ["Location", "Children", "Volunteers", "Sessions", "Children per volunteer"]
GROUP_COLUMNS = ["Volunteers", "Active", "Active %", "Arrivals"]


def _differs(recorded: str, calculated: str) -> bool:
    a, b = parse_number(recorded), parse_number(calculated)
    if a is not None and b is not None:
        return a != b
    return recorded != calculated


def _preferred_card(label: str, recorded: Optional[str], calculated: Optional[str]) -> Optional[SummaryCard]:
    """Calculated value wins; the recorded one is quoted only when it disagrees."""
    if calculated:
        delta = None
        if recorded and _differs(recorded, calculated):
            delta = f"Recorded: {recorded}"
        return SummaryCard(label=label, value=calculated, delta=delta)
    if recorded:
        return SummaryCard(label=label, value=recorded)
    return None


def build_summary_cards(metrics: SummaryMetrics) -> list[SummaryCard]:
    cards: list[SummaryCard] = []

    hours_card = _preferred_card(
        "Volunteer hours", metrics.volunteer_hours_recorded, metrics.volunteer_hours_calculated
    )
    if hours_card:
        cards.append(hours_card)

    children_card = _preferred_card(
        "Children arrivals", metrics.children_recorded, metrics.children_calculated
    )
    if children_card:
        cards.append(children_card)

    if metrics.total_volunteers:
        cards.append(SummaryCard(label="Volunteers", value=metrics.total_volunteers))
    if metrics.active_volunteers:
        cards.append(SummaryCard(label="Active volunteers", value=metrics.active_volunteers))
    if metrics.active_percentage:
        value = metrics.active_percentage
        if not value.endswith("%"):
            value += "%"
        cards.append(SummaryCard(label="Active percentage", value=value))

    if hours_card and children_card:
        hours = parse_number(hours_card.value)
        children = parse_number(children_card.value)
        if hours is not None and children is not None and hours != 0:
            cards.append(
                SummaryCard(label="Children per volunteer hour", value=format_decimal(children / hours))
            )

    extras = [SummaryCard(label=label, value=value) for label, value in metrics.extras]
    return extras + cards


def _table(key: str, title: str, columns: list[str], rows: list[list[str]]) -> dict:
    return {"key": key, "title": title, "columns": columns, "rows": rows}


def _group_rows(rows: list[GroupStatRow]) -> list[list[str]]:
    return [[r.label, r.volunteers, r.active, r.active_percentage, r.arrivals] for r in rows]


def build_tables(parsed: ParsedExport) -> list[dict]:
    return [
        _table(
            "locations",
            "By location",
            LOCATION_COLUMNS,
            [
                [r.location, r.children, r.volunteers, r.sessions, r.children_per_volunteer]
                for r in parsed.locations
            ],
        ),
        _table("schools", "By school", ["School"] + GROUP_COLUMNS, _group_rows(parsed.schools)),
        _table("grades", "By grade", ["Grade"] + GROUP_COLUMNS, _group_rows(parsed.grades)),
    ]


def _bar_chart(key: str, title: str, labels: list[str], datasets: list[tuple[str, list[float]]]) -> dict:
    return {
        "key": key,
        "title": title,
        "type": "bar",
        "labels": labels,
        "datasets": [{"label": label, "data": data} for label, data in datasets],
    }


def _group_chart(key: str, title: str, rows: list[GroupStatRow]) -> dict:
    """Active volunteers against arrivals, or against active % when no arrivals parse."""
    labels = [r.label for r in rows]
    active = [number_or_zero(r.active) for r in rows]
    if any(parse_number(r.arrivals) is not None for r in rows):
        second = ("Arrivals", [number_or_zero(r.arrivals) for r in rows])
    else:
        second = ("Active %", [number_or_zero(r.active_percentage) for r in rows])
    return _bar_chart(key, title, labels, [("Active volunteers", active), second])


def build_charts(parsed: ParsedExport) -> list[dict]:
    charts: list[dict] = []
    if parsed.locations:
        charts.append(
            _bar_chart(
                "locations",
                "Children and volunteers by location",
                [r.location for r in parsed.locations],
                [
                    ("Children", [number_or_zero(r.children) for r in parsed.locations]),
                    ("Volunteers", [number_or_zero(r.volunteers) for r in parsed.locations]),
                ],
            )
        )
    if parsed.schools:
        charts.append(_group_chart("schools", "Activity by school", parsed.schools))
    if parsed.grades:
        charts.append(_group_chart("grades", "Activity by grade", parsed.grades))
    return charts


def build_filters(parsed: ParsedExport) -> dict[str, list[str]]:
    return {
        "locations": [r.location for r in parsed.locations],
        "schools": [r.label for r in parsed.schools],
        "grades": [r.label for r in parsed.grades],
    }


def build_statistics(text: str, layout: ExportLayout = DEFAULT_LAYOUT) -> Optional[dict]:
    """Published export text -> summary cards, tables, charts and filter lists.

    Pure function of its input. Returns None only when the header row is missing;
    a header with no data rows yields empty collections.
    """

    parsed = parse_export(text, layout)
    if parsed is None:
        return None
    return {
        "summaryCards": [c.to_dict() for c in build_summary_cards(parsed.metrics)],
        "tables": build_tables(parsed),
        "charts": build_charts(parsed),
        "filters": build_filters(parsed),
    }
