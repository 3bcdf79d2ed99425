"""Tests for descriptor assembly and the report catalogue."""

from decimal import Decimal

import pytest

from portfolio_reports.core.exceptions import UnknownReportError
from portfolio_reports.reports.catalogue import REPORT_IDS, build_catalogue, build_report_detail
from portfolio_reports.reports.context import ReportContext
from portfolio_reports.reports.descriptors import build_descriptor, build_report_url, count_metric, currency_metric
from portfolio_reports.reports.filters import ReportFilters, resolve_filters


class TestMetrics:
    """Tests for metric values and their formatted strings."""

    def test_currency_metric(self) -> None:
        """Currency metrics carry a float value and a two-decimal string."""
        m = currency_metric("Total", Decimal("17000"))
        assert m.value == 17000.0
        assert m.formatted == "17,000.00"

    def test_count_metric(self) -> None:
        """Count metrics carry an int value and a plain string."""
        m = count_metric("Loans", 1234)
        assert m.value == 1234
        assert m.formatted == "1,234"


class TestReportUrl:
    """Tests for detail-page links."""

    def test_no_filters(self) -> None:
        """Without filters the link has no query string."""
        assert build_report_url("borrower-list", ReportFilters()) == "/reports/borrower-list"

    def test_only_set_filters_are_appended(self) -> None:
        """A missing bound is left out of the query string."""
        url = build_report_url("borrower-list", ReportFilters(end_date="2024-12-31"))
        assert url == "/reports/borrower-list?endDate=2024-12-31"

    def test_extra_query(self) -> None:
        """Extra parameters follow the date filters."""
        url = build_report_url(
            "upcoming-payment-schedule",
            ReportFilters(start_date="2024-01-01", end_date="2024-12-31"),
            {"mode": "in-range"},
        )
        assert url == "/reports/upcoming-payment-schedule?startDate=2024-01-01&endDate=2024-12-31&mode=in-range"

    def test_descriptor_shape(self) -> None:
        """Descriptors open in a new tab and suggest both date filters by default."""
        d = build_descriptor("x", "X", "Something.", [count_metric("N", 1)], ReportFilters())
        assert d.openInNewTab is True
        assert d.suggestedFilters == ["startDate", "endDate"]
        assert d.url == "/reports/x"


class TestCatalogue:
    """Tests for the ordered report catalogue."""

    def test_order(self, static_snapshot, today) -> None:
        """The catalogue always lists the six reports in dashboard order."""
        descriptors = build_catalogue(ReportContext(snapshot=static_snapshot, today=today))
        assert [d.id for d in descriptors] == [
            "loan-disbursement-summary",
            "repayment-performance",
            "upcoming-payment-schedule",
            "all-loans-report",
            "active-loans-report",
            "borrower-list",
        ]
        assert list(REPORT_IDS) == [d.id for d in descriptors]

    def test_empty_dataset_still_lists_every_report(self, make_snapshot) -> None:
        """No data means zero metrics, not missing reports."""
        descriptors = build_catalogue(ReportContext(snapshot=make_snapshot()))
        assert len(descriptors) == 6
        assert all(m.value == 0 for d in descriptors for m in d.metrics)

    def test_links_carry_filters(self, static_snapshot, today) -> None:
        """Every link carries the applied filters."""
        ctx = ReportContext(snapshot=static_snapshot, filters=resolve_filters("2024-01-01", None), today=today)
        for d in build_catalogue(ctx):
            assert d.url.startswith(f"/reports/{d.id}?startDate=2024-01-01")

    def test_unknown_report(self, static_snapshot) -> None:
        """An id outside the catalogue raises UnknownReportError."""
        with pytest.raises(UnknownReportError) as exc_info:
            build_report_detail("nope", ReportContext(snapshot=static_snapshot))
        assert exc_info.value.report_id == "nope"
        assert str(exc_info.value) == "Unknown report: nope"
