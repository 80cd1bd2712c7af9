"""SQLAlchemy models for the eggledger database."""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    REAL,
    TIMESTAMP,
    create_engine,
    func,
    text,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

TABLE_NAME = "daily_records"


class DailyRecord(Base):
    """Daily production record, one row per calendar date."""

    __tablename__ = TABLE_NAME
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    # ISO text (YYYY-MM-DD) so that text order is date order
    date = Column(Text, unique=True, nullable=False)
    produced_eggs = Column(Integer, server_default=text("0"))
    breakages = Column(Integer, server_default=text("0"))
    sold_eggs = Column(Integer, server_default=text("0"))
    price_per_egg = Column(REAL, server_default=text("0"))
    credit_amount = Column(REAL, server_default=text("0"))
    credit_name = Column(Text, server_default=text("''"))
    created_at = Column(TIMESTAMP, server_default=func.current_timestamp())


def create_db_engine(database_url: str) -> Engine:
    """Create an engine without touching the schema.

    Schema creation and migration belong to the SchemaManager, which must see
    the table as it exists on disk before anything is created.
    """
    return create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to an engine."""
    return sessionmaker(bind=engine)
