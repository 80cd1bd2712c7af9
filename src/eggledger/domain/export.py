"""CSV export of daily records."""

import logging
from pathlib import Path
from typing import Optional, TextIO

from eggledger.database.base import Database
from eggledger.domain.entities import DailyRecord

logger = logging.getLogger(__name__)

EXPORT_HEADER = (
    "Date",
    "Produced Eggs",
    "Breakages",
    "Sold Eggs",
    "Remaining Eggs",
    "Price Per Egg",
    "Cash Sales",
    "Credit Amount",
    "Credit Name",
)


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def quote(value: str) -> str:
    """Quote a text field, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def format_record_row(record: DailyRecord) -> str:
    """Render one record as a CSV line (without line terminator)."""
    fields = [
        record.date_label,
        format_number(record.produced_eggs),
        format_number(record.breakages),
        format_number(record.sold_eggs),
        format_number(record.remaining_eggs),
        format_number(record.price_per_egg),
        format_number(record.cash_sales),
        format_number(record.credit_amount),
        quote(record.credit_name),
    ]
    return ",".join(fields)


def render_csv(records: list[DailyRecord]) -> str:
    """Render records as CSV text with the header line."""
    lines = [",".join(EXPORT_HEADER)]
    lines.extend(format_record_row(record) for record in records)
    return "\n".join(lines) + "\n"


class ExportService:
    """Service for exporting records as comma-separated text."""

    def __init__(self, db: Database):
        """Initialize export service.

        Args:
            db: Database instance
        """
        self.db = db

    def export_csv(self, sink: Optional[TextIO] = None) -> str:
        """Render every record, oldest date first.

        Numbers are written bare; the credit name is always quoted.

        Args:
            sink: Optional text stream that also receives the output

        Returns:
            The CSV text, header line included
        """
        records = self.db.export_all_records()
        csv_text = render_csv(records)
        if sink is not None:
            sink.write(csv_text)
        logger.debug("Exported %d records", len(records))
        return csv_text

    def write_csv(self, sink: TextIO) -> int:
        """Write the CSV export to a text stream.

        Returns:
            Number of records written
        """
        records = self.db.export_all_records()
        sink.write(render_csv(records))
        logger.debug("Exported %d records", len(records))
        return len(records)

    def export_to_file(self, path: str | Path) -> int:
        """Write the CSV export to a file.

        Returns:
            Number of records written
        """
        with open(path, "w", encoding="utf-8", newline="") as f:
            records_count = self.write_csv(f)
        logger.info("Wrote %d records to %s", records_count, path)
        return records_count
