# portfolio_reports/reports/filters.py

import datetime
import re
from dataclasses import dataclass
from typing import Optional

# Stand-ins for a missing bound, wide enough that every real record compares inside.
EARLIEST_DATE = datetime.date(1900, 1, 1)
LATEST_DATE = datetime.date(2100, 12, 31)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_param(value: Optional[str]) -> Optional[datetime.date]:
    """
    Strict YYYY-MM-DD parse. Anything else (blank, wrong shape, impossible
    calendar day) is treated as "not given" rather than an error.
    """
    if value is None:
        return None
    value = str(value).strip()
    if not _ISO_DATE.match(value):
        return None
    try:
        return datetime.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


@dataclass(frozen=True)
class DateRange:
    start: datetime.date
    end: datetime.date

    def contains(self, day: Optional[datetime.date]) -> bool:
        """Inclusive on both ends; undated records never match."""
        return day is not None and self.start <= day <= self.end


@dataclass(frozen=True)
class ReportFilters:
    """Normalised filter strings (None when absent) plus the concrete range they imply."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @property
    def date_range(self) -> DateRange:
        start = parse_date_param(self.start_date) or EARLIEST_DATE
        end = parse_date_param(self.end_date) or LATEST_DATE
        return DateRange(start=start, end=end)

    def as_query(self) -> dict[str, str]:
        """Only the filters that are actually set, keyed by their URL names."""
        params = {}
        if self.start_date:
            params["startDate"] = self.start_date
        if self.end_date:
            params["endDate"] = self.end_date
        return params

    def as_dict(self) -> dict[str, Optional[str]]:
        return {"startDate": self.start_date, "endDate": self.end_date}


def resolve_filters(start_raw: Optional[str] = None, end_raw: Optional[str] = None) -> ReportFilters:
    start = parse_date_param(start_raw)
    end = parse_date_param(end_raw)
    return ReportFilters(
        start_date=start.isoformat() if start else None,
        end_date=end.isoformat() if end else None,
    )
