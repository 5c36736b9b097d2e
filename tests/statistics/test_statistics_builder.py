import pytest
from conftest import export_text

from src.volunteer_roster.volunteer_roster.statistics.builder import build_statistics, build_summary_cards
from src.volunteer_roster.volunteer_roster.statistics.model import SummaryMetrics


def _cards(**kwargs):
    return [c.to_dict() for c in build_summary_cards(SummaryMetrics(**kwargs))]


def test_sample_export_builds_full_result(sample_export):
    result = build_statistics(sample_export)

    assert set(result) == {"summaryCards", "tables", "charts", "filters"}
    assert len(result["tables"]) == 3
    assert [t["key"] for t in result["tables"]] == ["locations", "schools", "grades"]
    assert [c["key"] for c in result["charts"]] == ["locations", "schools", "grades"]

    by_key = {t["key"]: t for t in result["tables"]}
    for key in ("locations", "schools", "grades"):
        assert len(result["filters"][key]) == len(by_key[key]["rows"])


def test_sample_export_summary_cards_order(sample_export):
    cards = build_statistics(sample_export)["summaryCards"]

    assert cards == [
        {"label": "Termini ukupno", "value": "75"},
        {"label": "Volunteer hours", "value": "500", "delta": "Recorded: 480"},
        {"label": "Children arrivals", "value": "2.004"},
        {"label": "Volunteers", "value": "60"},
        {"label": "Active volunteers", "value": "38"},
        {"label": "Active percentage", "value": "63%"},
        {"label": "Children per volunteer hour", "value": "4,01"},
    ]


def test_calculated_hours_preferred_with_recorded_delta():
    cards = _cards(volunteer_hours_recorded="10", volunteer_hours_calculated="12")
    assert cards == [{"label": "Volunteer hours", "value": "12", "delta": "Recorded: 10"}]


def test_equal_recorded_and_calculated_have_no_delta():
    cards = _cards(volunteer_hours_recorded="10", volunteer_hours_calculated="10")
    assert cards == [{"label": "Volunteer hours", "value": "10"}]


def test_numerically_equal_values_have_no_delta():
    cards = _cards(children_recorded="1.000", children_calculated="1000")
    assert "delta" not in cards[0]


def test_recorded_only_is_used_without_delta():
    cards = _cards(children_recorded="55")
    assert cards == [{"label": "Children arrivals", "value": "55"}]


def test_ratio_card_uses_comma_decimal():
    cards = _cards(volunteer_hours_recorded="40", children_recorded="100")
    assert cards[-1] == {"label": "Children per volunteer hour", "value": "2,50"}


@pytest.mark.parametrize(
    "hours, children",
    [("0", "100"), ("n/a", "100"), ("40", "lots"), (None, "100"), ("40", None)],
)
def test_ratio_card_suppressed_without_two_numbers(hours, children):
    cards = _cards(volunteer_hours_recorded=hours, children_recorded=children)
    assert all(c["label"] != "Children per volunteer hour" for c in cards)


def test_active_percentage_suffix_not_doubled():
    assert _cards(active_percentage="63%") == [{"label": "Active percentage", "value": "63%"}]
    assert _cards(active_percentage="63") == [{"label": "Active percentage", "value": "63%"}]


def test_extras_come_before_computed_cards():
    cards = _cards(total_volunteers="60", extras=[("Termini", "75"), ("Djeca ukupno", "300")])
    assert [c["label"] for c in cards] == ["Termini", "Djeca ukupno", "Volunteers"]


def test_no_header_returns_none():
    assert build_statistics("nothing\there\nat all") is None


def test_header_only_returns_empty_collections():
    result = build_statistics(export_text({0: "LOKACIJA"}))

    assert result["summaryCards"] == []
    assert result["charts"] == []
    assert [t["rows"] for t in result["tables"]] == [[], [], []]
    assert result["filters"] == {"locations": [], "schools": [], "grades": []}


def test_tables_keep_source_order_and_raw_values(sample_export):
    tables = {t["key"]: t for t in build_statistics(sample_export)["tables"]}

    assert tables["locations"]["columns"][0] == "Location"
    assert tables["locations"]["rows"] == [
        ["Dom Nazorova", "1.204", "310", "40", "3,88"],
        ["Dom Zagreb", "800", "200", "35", "4,00"],
    ]
    assert tables["schools"]["rows"][1] == ["XV. gimnazija", "35", "20", "57%", "210"]
    assert tables["grades"]["rows"] == [["1. razred", "20", "12", "60%", "90"]]


def test_location_chart_series(sample_export):
    chart = build_statistics(sample_export)["charts"][0]

    assert chart["type"] == "bar"
    assert chart["labels"] == ["Dom Nazorova", "Dom Zagreb"]
    assert chart["datasets"] == [
        {"label": "Children", "data": [1204.0, 800.0]},
        {"label": "Volunteers", "data": [310.0, 200.0]},
    ]


def test_school_chart_uses_arrivals_when_available(sample_export):
    chart = build_statistics(sample_export)["charts"][1]
    assert [d["label"] for d in chart["datasets"]] == ["Active volunteers", "Arrivals"]
    assert chart["datasets"][1]["data"] == [150.0, 210.0]


def test_school_chart_falls_back_to_active_percentage():
    text = export_text(
        {0: "LOKACIJA"},
        {6: "Gimnazija A", 8: "10", 9: "50%"},
        {6: "Gimnazija B", 8: "x", 9: "25%"},
    )
    result = build_statistics(text)

    assert [c["key"] for c in result["charts"]] == ["schools"]
    chart = result["charts"][0]
    assert chart["datasets"] == [
        {"label": "Active volunteers", "data": [10.0, 0.0]},
        {"label": "Active %", "data": [50.0, 25.0]},
    ]


def test_unparseable_chart_values_are_zero():
    text = export_text({0: "LOKACIJA"}, {0: "Dom Zagreb", 1: "?", 2: "4"})
    chart = build_statistics(text)["charts"][0]
    assert chart["datasets"][0]["data"] == [0.0]


def test_filters_keep_duplicates_in_order():
    text = export_text(
        {0: "LOKACIJA"},
        {0: "Dom Zagreb", 12: "2. razred"},
        {0: "Dom Nazorova", 12: "2. razred"},
        {0: "Dom Zagreb"},
    )
    filters = build_statistics(text)["filters"]
    assert filters["locations"] == ["Dom Zagreb", "Dom Nazorova", "Dom Zagreb"]
    assert filters["grades"] == ["2. razred", "2. razred"]
    assert filters["schools"] == []


def test_pipeline_is_repeatable(sample_export):
    assert build_statistics(sample_export) == build_statistics(sample_export)
