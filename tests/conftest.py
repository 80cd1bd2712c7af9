"""Shared pytest fixtures for eggledger tests."""

import tempfile
import os
from datetime import date
import pytest

from eggledger.database.factories import create_sqlite_database
from eggledger.domain.records import RecordService
from eggledger.domain.export import ExportService


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path and remove it afterwards."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    yield db_path

    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def temp_db(temp_db_path):
    """Create a temporary database for testing."""
    db = create_sqlite_database(database_path=temp_db_path)
    # Store the path for tests that need it
    db.database_path = temp_db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()


@pytest.fixture
def record_service(temp_db):
    """Create a RecordService with a temporary database."""
    return RecordService(temp_db)


@pytest.fixture
def export_service(temp_db):
    """Create an ExportService with a temporary database."""
    return ExportService(temp_db)


@pytest.fixture
def sample_records(temp_db):
    """Store two days of records and return their dates."""
    first = date(2024, 1, 1)
    second = date(2024, 1, 2)
    temp_db.upsert_daily_record(
        record_date=first,
        produced_eggs=10,
        breakages=1,
        sold_eggs=5,
        price_per_egg=2.0,
        credit_amount=3.0,
        credit_name="Alice",
    )
    temp_db.upsert_daily_record(
        record_date=second,
        produced_eggs=20,
        breakages=0,
        sold_eggs=10,
        price_per_egg=1.5,
        credit_amount=0.0,
        credit_name="",
    )
    return first, second


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
