# portfolio_reports/reports/borrower_list.py

import datetime
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from portfolio_reports.reports.context import ReportContext, ReportDetail
from portfolio_reports.reports.descriptors import build_descriptor, count_metric, currency_metric
from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import PortfolioSnapshot, borrower_identity
from portfolio_reports.schemas.record_schemas import BorrowerRecord
from portfolio_reports.schemas.report_schemas import BorrowerSummaryRow, Metric, ReportDescriptor
from portfolio_reports.utils.formatting import format_full_address
from portfolio_reports.utils.loan_calculations import money

REPORT_ID = "borrower-list"
NAME = "Borrower List"
DESCRIPTION = "Borrowers with at least one loan disbursed within the selected period."


@dataclass
class _BorrowerLoans:
    borrower: BorrowerRecord
    loan_count: int = 0
    total: Decimal = Decimal("0")
    first_date: Optional[datetime.date] = None
    last_date: Optional[datetime.date] = None

    def add(self, amount: Decimal, day: datetime.date):
        self.loan_count += 1
        self.total += amount
        self.first_date = day if self.first_date is None else min(self.first_date, day)
        self.last_date = day if self.last_date is None else max(self.last_date, day)


@dataclass(frozen=True)
class BorrowerListSummary:
    borrower_count: int
    total_loan_amount: Decimal
    loan_count: int


def detail_rows(snapshot: PortfolioSnapshot, date_range: DateRange) -> list[BorrowerSummaryRow]:
    """
    One row per borrower with a loan disbursed in range.

    Borrower records sharing a uid are folded into one row, reported under
    the lowest borrower id. Loans whose borrower record is missing are left
    out entirely.
    """
    grouped: dict[str, _BorrowerLoans] = {}

    for d, _, borrower in snapshot.booked_loans():
        if borrower is None or not date_range.contains(d.date):
            continue

        key = borrower_identity(borrower.uid, borrower.id)
        entry = grouped.get(key)
        if entry is None:
            entry = grouped[key] = _BorrowerLoans(borrower=borrower)
        elif borrower.id < entry.borrower.id:
            entry.borrower = borrower

        entry.add(d.amount, d.date)

    rows = []
    for entry in grouped.values():
        b = entry.borrower
        rows.append(
            BorrowerSummaryRow(
                borrower_id=b.id,
                uid=b.uid,
                name=b.name,
                gender=b.gender,
                dob=b.dob,
                annual_income=float(money(b.annual_income)) if b.annual_income is not None else None,
                blk=b.blk,
                street=b.street,
                unit=b.unit,
                building=b.building,
                pincode=b.pincode,
                address1=b.address1,
                full_address=format_full_address(
                    block=b.blk,
                    street=b.street,
                    unit=b.unit,
                    building=b.building,
                    address=b.address1,
                    postal=b.pincode,
                ),
                email=b.email,
                hand_phone=b.hand_phone,
                loan_count=entry.loan_count,
                total_loan_amount=float(money(entry.total)),
                first_loan_date=entry.first_date,
                last_loan_date=entry.last_date,
            )
        )

    # unnamed borrowers sort last
    rows.sort(key=lambda r: (r.name is None, r.name or "", r.borrower_id))
    return rows


def summarize(rows: list[BorrowerSummaryRow]) -> BorrowerListSummary:
    return BorrowerListSummary(
        borrower_count=len(rows),
        total_loan_amount=money(sum((Decimal(str(r.total_loan_amount)) for r in rows), Decimal("0"))),
        loan_count=sum(r.loan_count for r in rows),
    )


def detail_totals(rows: list[BorrowerSummaryRow]) -> list[Metric]:
    summary = summarize(rows)
    return [
        count_metric("Borrowers", summary.borrower_count),
        currency_metric("Total Loan Amount", summary.total_loan_amount),
        count_metric("Loans", summary.loan_count),
    ]


def describe(summary: BorrowerListSummary, filters: ReportFilters) -> ReportDescriptor:
    return build_descriptor(
        REPORT_ID,
        NAME,
        DESCRIPTION,
        metrics=[
            count_metric("Borrowers", summary.borrower_count),
            currency_metric("Total Loan Amount", summary.total_loan_amount),
            count_metric("Loans", summary.loan_count),
        ],
        filters=filters,
    )


def build_report(ctx: ReportContext) -> ReportDetail:
    rows = detail_rows(ctx.snapshot, ctx.date_range)
    return ReportDetail(
        descriptor=describe(summarize(rows), ctx.filters),
        rows=rows,
        totals=detail_totals(rows),
    )
