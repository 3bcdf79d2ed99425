# portfolio_reports/reports/disbursement_summary.py

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal

from portfolio_reports.reports.context import ReportContext, ReportDetail
from portfolio_reports.reports.descriptors import build_descriptor, count_metric, currency_metric
from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import PortfolioSnapshot
from portfolio_reports.schemas.record_schemas import DisbursementRecord
from portfolio_reports.schemas.report_schemas import DisbursementDayRow, Metric, ReportDescriptor
from portfolio_reports.utils.loan_calculations import average, money

REPORT_ID = "loan-disbursement-summary"
NAME = "Loan Disbursement Summary"
DESCRIPTION = "Overview of disbursement activity within the selected period."


@dataclass(frozen=True)
class DisbursementSummary:
    count: int
    total: Decimal

    @property
    def average(self) -> Decimal:
        return average(self.total, self.count)


def disbursements_in_range(snapshot: PortfolioSnapshot, date_range: DateRange) -> list[DisbursementRecord]:
    return [d for d, _, _ in snapshot.booked_loans() if date_range.contains(d.date)]


def summarize(snapshot: PortfolioSnapshot, date_range: DateRange) -> DisbursementSummary:
    loans = disbursements_in_range(snapshot, date_range)
    return DisbursementSummary(
        count=len(loans),
        total=money(sum((d.amount for d in loans), Decimal("0"))),
    )


def detail_rows(snapshot: PortfolioSnapshot, date_range: DateRange) -> list[DisbursementDayRow]:
    """One row per disbursement day, oldest first."""
    counts = defaultdict(int)
    totals = defaultdict(Decimal)
    for d in disbursements_in_range(snapshot, date_range):
        counts[d.date] += 1
        totals[d.date] += d.amount

    return [
        DisbursementDayRow(
            date=day,
            disbursement_count=counts[day],
            amount=float(money(totals[day])),
        )
        for day in sorted(totals)
    ]


def detail_totals(rows: list[DisbursementDayRow]) -> list[Metric]:
    return [
        currency_metric("Total Disbursed", sum((Decimal(str(r.amount)) for r in rows), Decimal("0"))),
        count_metric("Disbursement Days", len(rows)),
    ]


def describe(summary: DisbursementSummary, filters: ReportFilters) -> ReportDescriptor:
    return build_descriptor(
        REPORT_ID,
        NAME,
        DESCRIPTION,
        metrics=[
            currency_metric("Total Disbursed", summary.total),
            count_metric("Disbursement Count", summary.count),
            currency_metric("Average Disbursement", summary.average),
        ],
        filters=filters,
    )


def build_report(ctx: ReportContext) -> ReportDetail:
    rows = detail_rows(ctx.snapshot, ctx.date_range)
    return ReportDetail(
        descriptor=describe(summarize(ctx.snapshot, ctx.date_range), ctx.filters),
        rows=rows,
        totals=detail_totals(rows),
    )
