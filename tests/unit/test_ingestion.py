"""Unit tests for roster ingestion"""

import pytest
from credit_simulator.domain.ingestion import (
    ingest,
    ingest_report,
    parse_billing_amount,
    parse_counterpart_row,
    search_counterparts,
    split_roster_text,
)
from credit_simulator.domain.exceptions import MalformedRecordError


def test_parse_counterpart_row_example():
    """Thousands '.' and decimal ',' -> float billing and 30% ceiling"""
    counterpart = parse_counterpart_row("ACME;30111222333;1.234.567,89".split(";"))

    assert counterpart.id == "30111222333"
    assert counterpart.tax_id == "30111222333"
    assert counterpart.name == "ACME"
    assert counterpart.annual_billing == pytest.approx(1234567.89)
    assert counterpart.max_credit_limit == pytest.approx(370370.367)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("59833251,71", 59833251.71),
        ("44095506,9796", 44095506.9796),
        ("1.350.162.003,89", 1350162003.89),
        (" 7470304 ", 7470304.0),
        (1234567.89, 1234567.89),
        (20219171, 20219171.0),
    ],
)
def test_parse_billing_amount(raw, expected):
    assert parse_billing_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "12,3,4", None, True, float("nan"), "inf", [1], "1_000", "1e5", "infinity", "+5", "12,"],
)
def test_parse_billing_amount_rejects(raw):
    with pytest.raises(MalformedRecordError):
        parse_billing_amount(raw)


def test_parse_counterpart_row_accepts_numeric_cells():
    """Rows decoded from a spreadsheet carry numbers, not text"""
    counterpart = parse_counterpart_row(["TRANSPORTE PICCA SRL", 30716414279.0, 693749874.55])

    assert counterpart.tax_id == "30716414279"
    assert counterpart.annual_billing == pytest.approx(693749874.55)


def test_parse_counterpart_row_ignores_extra_cells():
    counterpart = parse_counterpart_row(["GENTA MIGUEL", "20222738823", "13673827,87", "extra", ""])
    assert counterpart.annual_billing == pytest.approx(13673827.87)


@pytest.mark.parametrize(
    "row",
    [
        ["ONLY NAME", "20222738823"],
        ["", "20222738823", "100"],
        ["NAME", "  ", "100"],
        ["NAME", None, "100"],
        ["NAME", "20222738823", "n/a"],
        "NAME;1;100",
    ],
)
def test_parse_counterpart_row_malformed(row):
    with pytest.raises(MalformedRecordError):
        parse_counterpart_row(row)


def test_ingest_skips_bad_rows_and_keeps_order():
    rows = [
        ["ZETA SA", "30000000001", "1.000,00"],
        ["BROKEN"],
        ["ALFA SRL", "30000000002", "not a number"],
        ["BETA SAS", "30000000003", "2.000,50"],
    ]

    counterparts = ingest(rows)

    assert [c.name for c in counterparts] == ["ZETA SA", "BETA SAS"]
    assert counterparts[1].annual_billing == pytest.approx(2000.5)
    assert counterparts[1].max_credit_limit == pytest.approx(600.15)


def test_ingest_empty_batch():
    assert ingest([]) == []


def test_ingest_duplicate_tax_id_keeps_first():
    rows = [
        ["FIRST NAME", "20236590918", "100,00"],
        ["OTHER", "20236590187", "50,00"],
        ["SECOND NAME", "20236590918", "999,00"],
    ]

    report = ingest_report(rows)

    assert [c.name for c in report.counterparts] == ["FIRST NAME", "OTHER"]
    assert report.counterparts[0].annual_billing == pytest.approx(100.0)
    assert report.duplicate_tax_ids == ("20236590918",)
    assert report.skipped_rows == 0


def test_ingest_report_counts_skipped_rows():
    report = ingest_report([["A", "1", "x"], [], ["B", "2", "10"]])

    assert len(report.counterparts) == 1
    assert report.skipped_rows == 2


def test_split_roster_text(sample_roster_text):
    rows = split_roster_text(sample_roster_text)

    assert len(rows) == 3
    assert rows[0] == ["MOYANO EDUARDO ALBERTO", "20175312650", "59833251,71"]

    counterparts = ingest(rows)
    assert counterparts[2].annual_billing == pytest.approx(1350162003.89)


def test_search_counterparts_by_name_and_tax_id(sample_roster_text):
    counterparts = ingest(split_roster_text(sample_roster_text))

    assert [c.tax_id for c in search_counterparts(counterparts, "piccioni")] == ["20236590918"]
    assert [c.name for c in search_counterparts(counterparts, "30714")] == ["CAMINOS AL PUERTO S.R.L."]
    assert search_counterparts(counterparts, "nobody") == []


def test_search_counterparts_empty_term_applies_limit(sample_roster_text):
    counterparts = ingest(split_roster_text(sample_roster_text))

    assert len(search_counterparts(counterparts, "")) == 3
    assert len(search_counterparts(counterparts, "  ", limit=2)) == 2


def test_parse_billing_amount_negative_text():
    assert parse_billing_amount("-1.000,50") == pytest.approx(-1000.5)
