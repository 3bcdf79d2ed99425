# portfolio_reports/reports/service.py
#
# Decides, once per request, where report data comes from. The live store
# is tried first; any failure degrades to the bundled static dataset with
# an advisory for the user. No retries.

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from portfolio_reports.core.exceptions import StoreUnavailableError
from portfolio_reports.reports.snapshot import PortfolioSnapshot
from portfolio_reports.reports.sources import SqlRowSource, StaticRowSource
from portfolio_reports.utils.database import SessionLocal, open_session

logger = logging.getLogger(__name__)

STORE_UNAVAILABLE = "Database connection unavailable."
UNEXPECTED_ERROR = "Unexpected error while loading data."


@dataclass(frozen=True)
class ReportDataset:
    snapshot: PortfolioSnapshot
    source: Literal["live", "static"]
    advisory: Optional[str] = None


def static_dataset(advisory: Optional[str] = None) -> ReportDataset:
    return ReportDataset(
        snapshot=PortfolioSnapshot.build(StaticRowSource()),
        source="static",
        advisory=advisory,
    )


def load_report_dataset(session_factory=SessionLocal) -> ReportDataset:
    try:
        db = open_session(session_factory)
    except StoreUnavailableError as exc:
        logger.warning("Live store unavailable, serving static data: %s", exc)
        return static_dataset(STORE_UNAVAILABLE)

    try:
        snapshot = PortfolioSnapshot.build(SqlRowSource(db))
    except Exception:
        logger.exception("Failed to load report data from the live store, serving static data")
        return static_dataset(UNEXPECTED_ERROR)
    finally:
        db.close()

    return ReportDataset(snapshot=snapshot, source="live")
