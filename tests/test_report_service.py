"""Tests for choosing between the live store and the static dataset."""

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_reports.core.exceptions import StoreUnavailableError
from portfolio_reports.reports.service import STORE_UNAVAILABLE, UNEXPECTED_ERROR, load_report_dataset
from portfolio_reports.utils.database import open_session


@pytest.fixture
def unreachable_session_factory(tmp_path):
    """Sessions pointing at a database file that cannot be created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'reports.db'}")
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture
def empty_session_factory():
    """Sessions on a reachable store that has no report tables."""
    engine = create_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    yield sessionmaker(bind=engine)
    engine.dispose()


class TestOpenSession:
    """Tests for the connection ping."""

    def test_reachable_store(self, session_factory) -> None:
        """A reachable store hands back an open session."""
        db = open_session(session_factory)
        try:
            assert db.is_active
        finally:
            db.close()

    def test_unreachable_store(self, unreachable_session_factory) -> None:
        """Connection failures surface as StoreUnavailableError."""
        with pytest.raises(StoreUnavailableError):
            open_session(unreachable_session_factory)


class TestLoadReportDataset:
    """Tests for the once-per-request source decision."""

    def test_live_store(self, seeded_session_factory) -> None:
        """A healthy store is used directly, with no advisory."""
        dataset = load_report_dataset(seeded_session_factory)
        assert dataset.source == "live"
        assert dataset.advisory is None
        assert len(dataset.snapshot.disbursements) == 4

    def test_empty_live_store_is_still_live(self, session_factory) -> None:
        """An empty but healthy store is not a failure."""
        dataset = load_report_dataset(session_factory)
        assert dataset.source == "live"
        assert dataset.snapshot.disbursements == []

    def test_store_unavailable(self, unreachable_session_factory, caplog) -> None:
        """An unreachable store falls back to static data with the connection advisory."""
        with caplog.at_level(logging.WARNING, logger="portfolio_reports.reports.service"):
            dataset = load_report_dataset(unreachable_session_factory)

        assert dataset.source == "static"
        assert dataset.advisory == STORE_UNAVAILABLE
        assert len(dataset.snapshot.disbursements) == 4
        assert "Live store unavailable" in caplog.text

    def test_query_failure(self, empty_session_factory, caplog) -> None:
        """A failure after connecting falls back with the generic advisory."""
        with caplog.at_level(logging.ERROR, logger="portfolio_reports.reports.service"):
            dataset = load_report_dataset(empty_session_factory)

        assert dataset.source == "static"
        assert dataset.advisory == UNEXPECTED_ERROR
        assert "Failed to load report data" in caplog.text
