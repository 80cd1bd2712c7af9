"""Tests for CSV export."""

import io
from datetime import date

from eggledger.domain.export import EXPORT_HEADER, ExportService, format_number

HEADER_LINE = (
    "Date,Produced Eggs,Breakages,Sold Eggs,Remaining Eggs,"
    "Price Per Egg,Cash Sales,Credit Amount,Credit Name"
)


def test_header_matches_export_format():
    assert ",".join(EXPORT_HEADER) == HEADER_LINE


def test_export_empty_table_is_header_only(export_service):
    assert export_service.export_csv() == HEADER_LINE + "\n"


def test_export_rows(export_service, sample_records):
    csv_text = export_service.export_csv()

    assert csv_text.splitlines() == [
        HEADER_LINE,
        '2024-01-01,10,1,5,4,2,10,3,"Alice"',
        '2024-01-02,20,0,10,10,1.5,15,0,""',
    ]


def test_export_orders_by_date(temp_db):
    temp_db.upsert_daily_record(record_date=date(2024, 2, 10), produced_eggs=1)
    temp_db.upsert_daily_record(record_date=date(2024, 2, 1), produced_eggs=2)

    lines = ExportService(temp_db).export_csv().splitlines()

    assert lines[1].startswith("2024-02-01,")
    assert lines[2].startswith("2024-02-10,")


def test_export_quotes_credit_names(temp_db):
    temp_db.add_credit_only(date(2024, 2, 1), 1.0, 'Bob "The Baker"')
    temp_db.add_credit_only(date(2024, 2, 1), 2.0, "Eve")

    line = ExportService(temp_db).export_csv().splitlines()[1]

    assert line.endswith(',3,"Bob ""The Baker"", Eve"')


def test_export_writes_to_sink(export_service, sample_records):
    sink = io.StringIO()

    csv_text = export_service.export_csv(sink=sink)

    assert sink.getvalue() == csv_text


def test_export_to_file(export_service, sample_records, tmp_path):
    output = tmp_path / "eggs.csv"

    count = export_service.export_to_file(output)

    assert count == 2
    assert output.read_text(encoding="utf-8") == export_service.export_csv()


def test_format_number():
    assert format_number(3) == "3"
    assert format_number(2.0) == "2"
    assert format_number(1.5) == "1.5"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"


def test_export_counts_records_not_lines(temp_db, tmp_path):
    temp_db.add_credit_only(date(2024, 2, 1), 1.0, "Ann\nSmith")
    output = tmp_path / "eggs.csv"

    count = ExportService(temp_db).export_to_file(output)

    assert count == 1
    assert '"Ann\nSmith"' in output.read_text(encoding="utf-8")


def test_write_csv_returns_record_count(export_service, sample_records):
    sink = io.StringIO()

    assert export_service.write_csv(sink) == 2
    assert sink.getvalue() == export_service.export_csv()
