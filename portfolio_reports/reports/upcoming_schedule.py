# portfolio_reports/reports/upcoming_schedule.py
"""
Upcoming Payment Schedule.

Two named behaviours, picked by the caller:

- ``from-today``: due strictly after the evaluation date and inside the
  start/end filters.
- ``in-range``: due between the start and end filters, inclusive, with no
  reference to the evaluation date.

Skipped, deleted and undated schedule rows never count, and neither do
rows belonging to a withdrawn (deleted) application.
"""

import datetime
from dataclasses import dataclass
from decimal import Decimal

from portfolio_reports.reports.context import ReportContext, ReportDetail, UpcomingMode
from portfolio_reports.reports.descriptors import build_descriptor, count_metric, currency_metric
from portfolio_reports.reports.filters import DateRange, ReportFilters
from portfolio_reports.reports.snapshot import PortfolioSnapshot
from portfolio_reports.schemas.record_schemas import PaymentScheduleRecord
from portfolio_reports.schemas.report_schemas import Metric, ReportDescriptor, UpcomingScheduleRow
from portfolio_reports.utils.formatting import format_display_date
from portfolio_reports.utils.loan_calculations import money

REPORT_ID = "upcoming-payment-schedule"
NAME = "Upcoming Payment Schedule"
DESCRIPTIONS = {
    UpcomingMode.FROM_TODAY: "Payments scheduled after today within the selected period.",
    UpcomingMode.IN_RANGE: "Payments scheduled within the selected period.",
}
UNKNOWN_BORROWER = "Unknown borrower"


@dataclass(frozen=True)
class UpcomingSummary:
    count: int
    scheduled_amount: Decimal


def is_upcoming(
        schedule: PaymentScheduleRecord,
        date_range: DateRange,
        today: datetime.date,
        mode: UpcomingMode,
) -> bool:
    if schedule.skip or schedule.deleted or schedule.date is None:
        return False
    if mode == UpcomingMode.FROM_TODAY:
        return today < schedule.date and date_range.contains(schedule.date)
    return date_range.contains(schedule.date)


def _application_for(snapshot: PortfolioSnapshot, schedule: PaymentScheduleRecord):
    disbursement = snapshot.disbursements_by_id.get(schedule.disbursement_id)
    application = snapshot.application_for(disbursement)
    if application is None and schedule.application_id is not None:
        application = snapshot.applications_by_id.get(schedule.application_id)
    return disbursement, application


def upcoming_schedules(
        snapshot: PortfolioSnapshot,
        date_range: DateRange,
        today: datetime.date,
        mode: UpcomingMode = UpcomingMode.FROM_TODAY,
) -> list[PaymentScheduleRecord]:
    selected = []
    for s in snapshot.payment_schedules:
        if not is_upcoming(s, date_range, today, mode):
            continue
        _, application = _application_for(snapshot, s)
        if application is not None and application.deleted:
            continue
        selected.append(s)

    selected.sort(key=lambda s: (s.date, s.id or 0))
    return selected


def summarize(
        snapshot: PortfolioSnapshot,
        date_range: DateRange,
        today: datetime.date,
        mode: UpcomingMode = UpcomingMode.FROM_TODAY,
) -> UpcomingSummary:
    schedules = upcoming_schedules(snapshot, date_range, today, mode)
    return UpcomingSummary(
        count=len(schedules),
        scheduled_amount=money(sum((s.amount for s in schedules), Decimal("0"))),
    )


def detail_rows(
        snapshot: PortfolioSnapshot,
        date_range: DateRange,
        today: datetime.date,
        mode: UpcomingMode = UpcomingMode.FROM_TODAY,
) -> list[UpcomingScheduleRow]:
    rows = []
    for s in upcoming_schedules(snapshot, date_range, today, mode):
        disbursement, application = _application_for(snapshot, s)
        borrower = snapshot.borrower_for(application)

        rows.append(
            UpcomingScheduleRow(
                schedule_id=s.id,
                disbursement_id=s.disbursement_id,
                date=s.date,
                display_date=format_display_date(s.date),
                amount=float(money(s.amount)),
                principal=float(money(s.principal)),
                interest=float(money(s.interest)),
                late_fee=float(money(s.late_fee)),
                late_interest=float(money(s.late_interest)),
                legal_fee=float(money(s.legal_fee)),
                renewal_fee=float(money(s.renewal_fee)),
                contract_variation_fee=float(money(s.contract_variation_fee)),
                cheque_dishonour_fee=float(money(s.cheque_dishonour_fee)),
                termination_fee=float(money(s.termination_fee)),
                google_calendar_url=s.google_calendar_url,
                account_number=disbursement.account_number if disbursement else None,
                loan_amount=float(money(disbursement.amount)) if disbursement else 0.0,
                borrower_name=getattr(borrower, "name", None) or UNKNOWN_BORROWER,
                borrower_uid=getattr(borrower, "uid", None),
                borrower_phone=getattr(borrower, "hand_phone", None),
                borrower_email=getattr(borrower, "email", None),
            )
        )
    return rows


def detail_totals(rows: list[UpcomingScheduleRow]) -> list[Metric]:
    def total(attr: str) -> Decimal:
        return sum((Decimal(str(getattr(r, attr))) for r in rows), Decimal("0"))

    return [
        currency_metric("Scheduled Amount", total("amount")),
        currency_metric("Principal Due", total("principal")),
        currency_metric("Interest Due", total("interest")),
        currency_metric("Late Fees", total("late_fee")),
        currency_metric("Late Interest", total("late_interest")),
    ]


def describe(
        summary: UpcomingSummary,
        filters: ReportFilters,
        mode: UpcomingMode = UpcomingMode.FROM_TODAY,
) -> ReportDescriptor:
    return build_descriptor(
        REPORT_ID,
        NAME,
        DESCRIPTIONS[mode],
        metrics=[
            currency_metric("Scheduled Amount", summary.scheduled_amount),
            count_metric("Upcoming Payments", summary.count),
        ],
        filters=filters,
        extra_query={"mode": mode.value} if mode != UpcomingMode.FROM_TODAY else None,
    )


def build_report(ctx: ReportContext) -> ReportDetail:
    today = ctx.evaluation_date
    rows = detail_rows(ctx.snapshot, ctx.date_range, today, ctx.upcoming_mode)
    summary = summarize(ctx.snapshot, ctx.date_range, today, ctx.upcoming_mode)
    return ReportDetail(
        descriptor=describe(summary, ctx.filters, ctx.upcoming_mode),
        rows=rows,
        totals=detail_totals(rows),
    )
