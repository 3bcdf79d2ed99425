# portfolio_reports/reports/repayment_performance.py

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal

from portfolio_reports.reports.context import ReportContext, ReportDetail
from portfolio_reports.reports.descriptors import build_descriptor, count_metric, currency_metric
from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import PortfolioSnapshot
from portfolio_reports.schemas.record_schemas import RepaymentRecord
from portfolio_reports.schemas.report_schemas import Metric, RepaymentDayRow, ReportDescriptor
from portfolio_reports.utils.loan_calculations import money

REPORT_ID = "repayment-performance"
NAME = "Repayment Performance"
DESCRIPTION = "Payments received from borrowers across the selected period."


@dataclass(frozen=True)
class RepaymentSummary:
    count: int
    total: Decimal
    principal: Decimal
    interest: Decimal


def repayments_in_range(snapshot: PortfolioSnapshot, date_range: DateRange) -> list[RepaymentRecord]:
    # deleted and bounced payments never count
    return [r for r in snapshot.repayments if not r.is_reversed and date_range.contains(r.date)]


def summarize(snapshot: PortfolioSnapshot, date_range: DateRange) -> RepaymentSummary:
    payments = repayments_in_range(snapshot, date_range)
    return RepaymentSummary(
        count=len(payments),
        total=money(sum((r.amount for r in payments), Decimal("0"))),
        principal=money(sum((r.principal for r in payments), Decimal("0"))),
        interest=money(sum((r.interest for r in payments), Decimal("0"))),
    )


def detail_rows(snapshot: PortfolioSnapshot, date_range: DateRange) -> list[RepaymentDayRow]:
    """Repayments grouped by payment day, oldest first."""
    grouped = defaultdict(lambda: {"count": 0, "principal": Decimal("0"), "interest": Decimal("0"), "amount": Decimal("0")})
    for r in repayments_in_range(snapshot, date_range):
        day = grouped[r.date]
        day["count"] += 1
        day["principal"] += r.principal
        day["interest"] += r.interest
        day["amount"] += r.amount

    return [
        RepaymentDayRow(
            date=day,
            repayment_count=grouped[day]["count"],
            principal=float(money(grouped[day]["principal"])),
            interest=float(money(grouped[day]["interest"])),
            amount=float(money(grouped[day]["amount"])),
        )
        for day in sorted(grouped)
    ]


def detail_totals(rows: list[RepaymentDayRow]) -> list[Metric]:
    def total(attr: str) -> Decimal:
        return sum((Decimal(str(getattr(r, attr))) for r in rows), Decimal("0"))

    return [
        currency_metric("Total Repaid", total("amount")),
        currency_metric("Principal Repaid", total("principal")),
        currency_metric("Interest Repaid", total("interest")),
    ]


def describe(summary: RepaymentSummary, filters: ReportFilters) -> ReportDescriptor:
    return build_descriptor(
        REPORT_ID,
        NAME,
        DESCRIPTION,
        metrics=[
            currency_metric("Total Repaid", summary.total),
            currency_metric("Principal Repaid", summary.principal),
            currency_metric("Interest Repaid", summary.interest),
            count_metric("Repayment Count", summary.count),
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
