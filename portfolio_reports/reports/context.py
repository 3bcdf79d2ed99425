# portfolio_reports/reports/context.py

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import PortfolioSnapshot
from portfolio_reports.schemas.report_schemas import Metric, ReportDescriptor


class UpcomingMode(str, Enum):
    # due after the evaluation date, up to the end filter
    FROM_TODAY = "from-today"
    # due anywhere inside the start/end filters
    IN_RANGE = "in-range"


@dataclass(frozen=True)
class ReportContext:
    """Everything one report request needs; nothing here outlives the request."""

    snapshot: PortfolioSnapshot
    filters: ReportFilters = field(default_factory=ReportFilters)
    today: Optional[datetime.date] = None
    upcoming_mode: UpcomingMode = UpcomingMode.FROM_TODAY

    @property
    def date_range(self) -> DateRange:
        return self.filters.date_range

    @property
    def evaluation_date(self) -> datetime.date:
        return self.today or datetime.date.today()


@dataclass(frozen=True)
class ReportDetail:
    descriptor: ReportDescriptor
    rows: list[Any]
    totals: list[Metric]
