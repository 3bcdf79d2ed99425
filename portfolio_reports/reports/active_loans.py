# portfolio_reports/reports/active_loans.py
"""
Active Loans.

A loan on a live application is active when all three hold:

1. it is not formally closed: the application status is not
   Cancelled / Canceled / Rejected;
2. it is *relevant*: it still has principal outstanding, OR its last
   payment falls in the period, OR the loan or application status is
   Active / Pending;
3. it falls in the *window*: it was disbursed in the period, OR its last
   payment falls in the period, OR it still has principal outstanding
   (whatever the dates).

A positive balance satisfies both 2 and 3 on its own, so loans still
owing money show up whenever they were disbursed.
"""

import datetime
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from portfolio_reports.reports.context import ReportContext, ReportDetail
from portfolio_reports.reports.descriptors import build_descriptor, count_metric, currency_metric
from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import LoanPosition, PortfolioSnapshot
from portfolio_reports.schemas.record_schemas import ApplicationRecord, DisbursementRecord
from portfolio_reports.schemas.report_schemas import ActiveLoanRow, Metric, ReportDescriptor
from portfolio_reports.utils.formatting import days_since_label
from portfolio_reports.utils.loan_calculations import ZERO, average, days_between, money

REPORT_ID = "active-loans-report"
NAME = "Active Loans Report"
DESCRIPTION = "Loans still carrying a balance, with recent activity, or in an active status."
UNKNOWN_BORROWER = "Unknown borrower"

CLOSED_STATUSES = frozenset({"Cancelled", "Canceled", "Rejected"})
ACTIVE_STATUSES = frozenset({"Active", "Pending"})


@dataclass(frozen=True)
class Eligibility:
    has_balance: bool
    recent_payment: bool
    active_status: bool
    disbursed_in_range: bool

    @property
    def is_relevant(self) -> bool:
        return self.has_balance or self.recent_payment or self.active_status

    @property
    def in_window(self) -> bool:
        return self.disbursed_in_range or self.recent_payment or self.has_balance

    @property
    def is_active(self) -> bool:
        return self.is_relevant and self.in_window


def is_closed(application: Optional[ApplicationRecord]) -> bool:
    return application is not None and application.loan_status in CLOSED_STATUSES


def has_active_status(disbursement: DisbursementRecord, application: Optional[ApplicationRecord]) -> bool:
    application_status = application.loan_status if application else None
    return disbursement.status in ACTIVE_STATUSES or application_status in ACTIVE_STATUSES


def assess(
        disbursement: DisbursementRecord,
        application: Optional[ApplicationRecord],
        position: LoanPosition,
        date_range: DateRange,
) -> Eligibility:
    return Eligibility(
        has_balance=position.outstanding_principal > ZERO,
        recent_payment=date_range.contains(position.last_payment_date),
        active_status=has_active_status(disbursement, application),
        disbursed_in_range=date_range.contains(disbursement.date),
    )


@dataclass(frozen=True)
class ActiveLoansSummary:
    loan_count: int
    total_disbursed: Decimal
    principal_repaid: Decimal
    outstanding: Decimal
    recent_payment_count: int


def detail_rows(
        snapshot: PortfolioSnapshot,
        date_range: DateRange,
        today: datetime.date,
) -> list[ActiveLoanRow]:
    """Largest balance first, then most recently touched."""
    rows = []
    for d, application, borrower in snapshot.booked_loans():
        if is_closed(application):
            continue

        pos = snapshot.position(d)
        eligibility = assess(d, application, pos, date_range)
        if not eligibility.is_active:
            continue

        rows.append(
            ActiveLoanRow(
                disbursement_id=d.id,
                application_id=application.id,
                borrower_id=application.borrower_id,
                borrower_uid=getattr(borrower, "uid", None),
                borrower_name=getattr(borrower, "name", None) or UNKNOWN_BORROWER,
                borrower_phone=getattr(borrower, "hand_phone", None),
                borrower_email=getattr(borrower, "email", None),
                borrower_address=getattr(borrower, "address1", None),
                account_number=d.account_number,
                loan_date=d.date,
                loan_amount=float(pos.loan_amount),
                loan_frequency=d.payment_frequency,
                branch=d.branch,
                tenure=d.installment_count,
                status=d.status,
                application_status=application.loan_status,
                principal_repaid=float(pos.principal_repaid),
                total_paid=float(pos.total_paid),
                outstanding_principal=float(pos.outstanding_principal),
                last_payment_date=pos.last_payment_date,
                recent_payment=eligibility.recent_payment,
                days_since_last_payment=days_between(pos.last_payment_date, today),
                days_since_label=days_since_label(pos.last_payment_date, today),
            )
        )

    rows.sort(
        key=lambda r: (
            r.outstanding_principal,
            r.last_payment_date or r.loan_date or datetime.date.min,
            r.disbursement_id or 0,
        ),
        reverse=True,
    )
    return rows


def _sum(rows: list[ActiveLoanRow], attr: str) -> Decimal:
    return money(sum((Decimal(str(getattr(r, attr))) for r in rows), Decimal("0")))


def summarize(rows: list[ActiveLoanRow]) -> ActiveLoansSummary:
    return ActiveLoansSummary(
        loan_count=len(rows),
        total_disbursed=_sum(rows, "loan_amount"),
        principal_repaid=_sum(rows, "principal_repaid"),
        outstanding=_sum(rows, "outstanding_principal"),
        recent_payment_count=sum(1 for r in rows if r.recent_payment),
    )


def detail_totals(rows: list[ActiveLoanRow]) -> list[Metric]:
    active_status_count = sum(
        1 for r in rows
        if r.status in ACTIVE_STATUSES or r.application_status in ACTIVE_STATUSES
    )
    return [
        count_metric("Active / Pending Status", active_status_count),
        currency_metric("Average Outstanding", average(_sum(rows, "outstanding_principal"), len(rows))),
    ]


def describe(summary: ActiveLoansSummary, filters: ReportFilters) -> ReportDescriptor:
    return build_descriptor(
        REPORT_ID,
        NAME,
        DESCRIPTION,
        metrics=[
            count_metric("Active Loans", summary.loan_count),
            currency_metric("Total Disbursed", summary.total_disbursed),
            currency_metric("Principal Repaid", summary.principal_repaid),
            currency_metric("Outstanding Principal", summary.outstanding),
            count_metric("Recent Payments", summary.recent_payment_count),
        ],
        filters=filters,
    )


def build_report(ctx: ReportContext) -> ReportDetail:
    rows = detail_rows(ctx.snapshot, ctx.date_range, ctx.evaluation_date)
    return ReportDetail(
        descriptor=describe(summarize(rows), ctx.filters),
        rows=rows,
        totals=detail_totals(rows),
    )
