"""Pytest configuration and fixtures."""

import datetime
from typing import Callable

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_reports.data.static_dataset import STATIC_DATASET
from portfolio_reports.models import Application, Borrower, Disbursement, PaymentSchedule, Repayment
from portfolio_reports.reports.snapshot import PortfolioSnapshot
from portfolio_reports.reports.sources import StaticRowSource
from portfolio_reports.schemas.record_schemas import (
    ApplicationRecord,
    BorrowerRecord,
    DisbursementRecord,
    PaymentScheduleRecord,
    RepaymentRecord,
)
from portfolio_reports.utils.database import Base

# dataset key -> (record schema, ORM model), in foreign-key order
TABLES = (
    ("borrowers", BorrowerRecord, Borrower),
    ("applications", ApplicationRecord, Application),
    ("disbursements", DisbursementRecord, Disbursement),
    ("repayments", RepaymentRecord, Repayment),
    ("payment_schedules", PaymentScheduleRecord, PaymentSchedule),
)


def seed_session(db: Session, dataset) -> None:
    """Insert a static-style dataset into the store behind `db`."""
    for key, record_type, model in TABLES:
        for row in dataset.get(key, ()):
            db.add(model(**record_type.model_validate(row).model_dump()))
        db.flush()
    db.commit()


@pytest.fixture
def today() -> datetime.date:
    """Fixed evaluation date inside the sample data's timeline."""
    return datetime.date(2024, 5, 1)


@pytest.fixture
def static_snapshot() -> PortfolioSnapshot:
    """Snapshot over the bundled sample dataset."""
    return PortfolioSnapshot.build(StaticRowSource())


@pytest.fixture
def make_snapshot() -> Callable[..., PortfolioSnapshot]:
    """Build a snapshot from ad-hoc record dicts."""

    def _make(**tables) -> PortfolioSnapshot:
        return PortfolioSnapshot.build(StaticRowSource(tables))

    return _make


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite store with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def seeded_session_factory(session_factory):
    """Session factory whose store holds the bundled sample dataset."""
    db = session_factory()
    try:
        seed_session(db, STATIC_DATASET)
    finally:
        db.close()
    return session_factory
