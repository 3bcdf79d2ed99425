# portfolio_reports/reports/all_loans.py

from dataclasses import dataclass
from decimal import Decimal

from portfolio_reports.reports.context import ReportContext, ReportDetail
from portfolio_reports.reports.descriptors import build_descriptor, count_metric, currency_metric
from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import PortfolioSnapshot, borrower_identity
from portfolio_reports.schemas.report_schemas import LoanDetailRow, Metric, ReportDescriptor
from portfolio_reports.utils.formatting import format_full_address
from portfolio_reports.utils.loan_calculations import loan_profit, money, outstanding_interest

REPORT_ID = "all-loans-report"
NAME = "All Loans Report"
DESCRIPTION = "Every loan disbursed within the selected period, with borrower details and repayment position."
UNKNOWN_BORROWER = "Unknown borrower"


@dataclass(frozen=True)
class AllLoansSummary:
    loan_count: int
    unique_borrowers: int
    total_amount: Decimal


def detail_rows(snapshot: PortfolioSnapshot, date_range: DateRange) -> list[LoanDetailRow]:
    """Loans on live applications disbursed in range, newest first."""
    rows = []
    for d, application, b in snapshot.booked_loans():
        if not date_range.contains(d.date):
            continue

        pos = snapshot.position(d)

        rows.append(
            LoanDetailRow(
                disbursement_id=d.id,
                application_id=application.id,
                borrower_id=application.borrower_id,
                borrower_uid=getattr(b, "uid", None),
                borrower_name=getattr(b, "name", None) or UNKNOWN_BORROWER,
                gender=getattr(b, "gender", None),
                dob=getattr(b, "dob", None),
                annual_income=float(money(getattr(b, "annual_income", None))),
                block=getattr(b, "blk", None),
                street=getattr(b, "street", None),
                unit_no=getattr(b, "unit", None),
                building=getattr(b, "building", None),
                postal=getattr(b, "pincode", None),
                address=getattr(b, "address1", None),
                full_address=format_full_address(
                    block=getattr(b, "blk", None),
                    street=getattr(b, "street", None),
                    unit=getattr(b, "unit", None),
                    building=getattr(b, "building", None),
                    address=getattr(b, "address1", None),
                    postal=getattr(b, "pincode", None),
                ),
                borrower_email=getattr(b, "email", None),
                borrower_phone=getattr(b, "hand_phone", None),
                account_number=d.account_number or application.account_number,
                loan_date=d.date,
                loan_amount=float(pos.loan_amount),
                remarks=d.remarks,
                status=d.status,
                tenure=d.installment_count,
                paid_principal=float(pos.principal_repaid),
                os_principal=float(pos.outstanding_principal),
                os_interest=float(outstanding_interest(pos.scheduled_interest, pos.interest_collected)),
                profit=float(loan_profit(pos.total_paid, pos.loan_amount)),
                interest_collected=float(pos.interest_collected),
                fees_collected=float(pos.fees_collected),
                last_paid_date=pos.last_payment_date,
            )
        )

    rows.sort(key=lambda r: (r.loan_date, r.disbursement_id or 0), reverse=True)
    return rows


def _sum(rows: list[LoanDetailRow], attr: str) -> Decimal:
    return money(sum((Decimal(str(getattr(r, attr))) for r in rows), Decimal("0")))


def summarize(rows: list[LoanDetailRow]) -> AllLoansSummary:
    identities = {borrower_identity(r.borrower_uid, r.borrower_id) for r in rows}
    identities.discard(None)
    return AllLoansSummary(
        loan_count=len(rows),
        unique_borrowers=len(identities),
        total_amount=_sum(rows, "loan_amount"),
    )


def detail_totals(rows: list[LoanDetailRow]) -> list[Metric]:
    return [
        currency_metric("Total Loan Amount", _sum(rows, "loan_amount")),
        currency_metric("Principal Paid", _sum(rows, "paid_principal")),
        currency_metric("Outstanding Principal", _sum(rows, "os_principal")),
        currency_metric("Outstanding Interest", _sum(rows, "os_interest")),
        currency_metric("Interest Collected", _sum(rows, "interest_collected")),
        currency_metric("Profit", _sum(rows, "profit")),
    ]


def describe(summary: AllLoansSummary, filters: ReportFilters) -> ReportDescriptor:
    return build_descriptor(
        REPORT_ID,
        NAME,
        DESCRIPTION,
        metrics=[
            currency_metric("Total Loan Amount", summary.total_amount),
            count_metric("Loan Count", summary.loan_count),
            count_metric("Unique Borrowers", summary.unique_borrowers),
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
