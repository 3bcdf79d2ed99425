"""Tests for the Loan Disbursement Summary report."""

import datetime
from decimal import Decimal

from portfolio_reports.reports import disbursement_summary
from portfolio_reports.reports.context import ReportContext
from portfolio_reports.reports.filters import resolve_filters


def _loans(make_snapshot):
    return make_snapshot(
        applications=[{"id": 10}, {"id": 11}, {"id": 12, "deleted": True}],
        disbursements=[
            {"id": 1, "application_id": 10, "date": "2024-03-05", "amount": 5000},
            {"id": 2, "application_id": 11, "date": "2024-04-20", "amount": 12000},
            {"id": 3, "application_id": 12, "date": "2024-04-20", "amount": 9999},
            {"id": 4, "application_id": 10, "date": None, "amount": 700},
        ],
    )


class TestSummary:
    """Tests for the catalogue figures."""

    def test_count_total_average(self, make_snapshot) -> None:
        """Two loans of 5000 and 12000 give count 2, total 17000, average 8500."""
        filters = resolve_filters("2024-01-01", "2024-12-31")
        summary = disbursement_summary.summarize(_loans(make_snapshot), filters.date_range)
        assert summary.count == 2
        assert summary.total == Decimal("17000.00")
        assert summary.average == Decimal("8500.00")

    def test_empty_range(self, make_snapshot) -> None:
        """No loans in range gives zeros and no division error."""
        filters = resolve_filters("2025-01-01", "2025-12-31")
        summary = disbursement_summary.summarize(_loans(make_snapshot), filters.date_range)
        assert summary.count == 0
        assert summary.average == Decimal("0.00")

    def test_missing_application_is_dropped(self, make_snapshot) -> None:
        """A loan without an application record is not counted, same as the other loan reports."""
        snapshot = make_snapshot(disbursements=[{"id": 1, "application_id": 404, "date": "2024-01-02", "amount": 100}])
        summary = disbursement_summary.summarize(snapshot, resolve_filters().date_range)
        assert summary.count == 0
        assert summary.total == Decimal("0.00")

    def test_descriptor(self, make_snapshot) -> None:
        """The descriptor lists total, count and average in that order."""
        filters = resolve_filters("2024-01-01", "2024-12-31")
        detail = disbursement_summary.build_report(ReportContext(snapshot=_loans(make_snapshot), filters=filters))
        metrics = detail.descriptor.metrics
        assert [m.label for m in metrics] == ["Total Disbursed", "Disbursement Count", "Average Disbursement"]
        assert [m.formatted for m in metrics] == ["17,000.00", "2", "8,500.00"]
        assert detail.descriptor.url == "/reports/loan-disbursement-summary?startDate=2024-01-01&endDate=2024-12-31"


class TestDetail:
    """Tests for the per-day rows."""

    def test_rows_grouped_by_day_oldest_first(self, make_snapshot) -> None:
        """Each disbursement day gets one row; undated and withdrawn loans are absent."""
        snapshot = _loans(make_snapshot)
        rows = disbursement_summary.detail_rows(snapshot, resolve_filters().date_range)
        assert [(r.date, r.disbursement_count, r.amount) for r in rows] == [
            (datetime.date(2024, 3, 5), 1, 5000.0),
            (datetime.date(2024, 4, 20), 1, 12000.0),
        ]

    def test_totals(self, static_snapshot) -> None:
        """Totals add up the day rows of the sample data."""
        detail = disbursement_summary.build_report(ReportContext(snapshot=static_snapshot))
        assert detail.totals[0].formatted == "25,000.00"
        assert detail.totals[1].value == 3
