# portfolio_reports/reports/descriptors.py
#
# Wraps raw report figures into the catalogue shape shown on the dashboard.

from decimal import Decimal
from typing import Optional
from urllib.parse import urlencode

from portfolio_reports.core.config import REPORTS_BASE_PATH
from portfolio_reports.reports.filters import ReportFilters
from portfolio_reports.schemas.report_schemas import Metric, ReportDescriptor
from portfolio_reports.utils.formatting import format_count, format_currency
from portfolio_reports.utils.loan_calculations import money


def currency_metric(label: str, amount: Decimal) -> Metric:
    amount = money(amount)
    return Metric(label=label, value=float(amount), formatted=format_currency(amount))


def count_metric(label: str, count: int) -> Metric:
    return Metric(label=label, value=int(count), formatted=format_count(count))


def build_report_url(
        report_id: str,
        filters: ReportFilters,
        extra: Optional[dict[str, str]] = None,
) -> str:
    """Detail-page link; only filters that are set end up in the query string."""
    params = filters.as_query()
    if extra:
        params.update(extra)

    url = f"{REPORTS_BASE_PATH}/{report_id}"
    query = urlencode(params)
    return f"{url}?{query}" if query else url


def build_descriptor(
        report_id: str,
        name: str,
        description: str,
        metrics: list[Metric],
        filters: ReportFilters,
        suggested_filters: tuple[str, ...] = ("startDate", "endDate"),
        extra_query: Optional[dict[str, str]] = None,
) -> ReportDescriptor:
    return ReportDescriptor(
        id=report_id,
        name=name,
        description=description,
        url=build_report_url(report_id, filters, extra_query),
        openInNewTab=True,
        metrics=metrics,
        suggestedFilters=list(suggested_filters),
    )
