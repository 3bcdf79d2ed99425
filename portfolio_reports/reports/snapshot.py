# portfolio_reports/reports/snapshot.py
"""
Per-request, read-only view over the five record sets.

Built once from a RowSource and passed by reference to every report, so
application/borrower lookups and per-loan repayment totals are computed a
single time per request instead of once per report.
"""

import datetime
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator, Optional, TypeVar

from portfolio_reports.reports.sources import RowSource
from portfolio_reports.schemas.record_schemas import (
    ApplicationRecord,
    BorrowerRecord,
    DisbursementRecord,
    PaymentScheduleRecord,
    RepaymentRecord,
)
from portfolio_reports.utils.loan_calculations import ZERO, money, outstanding_principal

logger = logging.getLogger(__name__)

R = TypeVar("R")


def index_by_id(records: Iterable[R]) -> dict[int, R]:
    """Primary-key lookup; records without an id are skipped."""
    return {r.id: r for r in records if r.id is not None}


@dataclass(frozen=True)
class LoanPosition:
    """What has happened on one loan so far, counting only non-reversed repayments."""

    loan_amount: Decimal
    principal_repaid: Decimal = ZERO
    interest_collected: Decimal = ZERO
    total_paid: Decimal = ZERO
    fees_collected: Decimal = ZERO
    scheduled_interest: Decimal = ZERO
    last_payment_date: Optional[datetime.date] = None

    @property
    def outstanding_principal(self) -> Decimal:
        return outstanding_principal(self.loan_amount, self.principal_repaid)


def _position(
        disbursement: DisbursementRecord,
        repayments: list[RepaymentRecord],
        scheduled_interest: Decimal,
) -> LoanPosition:
    principal = interest = paid = fees = Decimal("0")
    last_date = None

    for r in repayments:
        principal += r.principal
        interest += r.interest
        paid += r.amount
        fees += r.fees_total
        if r.date is not None and (last_date is None or r.date > last_date):
            last_date = r.date

    return LoanPosition(
        loan_amount=money(disbursement.amount),
        principal_repaid=money(principal),
        interest_collected=money(interest),
        total_paid=money(paid),
        fees_collected=money(fees),
        scheduled_interest=money(scheduled_interest),
        last_payment_date=last_date,
    )


@dataclass
class PortfolioSnapshot:
    borrowers: list[BorrowerRecord]
    applications: list[ApplicationRecord]
    disbursements: list[DisbursementRecord]
    repayments: list[RepaymentRecord]
    payment_schedules: list[PaymentScheduleRecord]

    applications_by_id: dict[int, ApplicationRecord] = field(init=False)
    borrowers_by_id: dict[int, BorrowerRecord] = field(init=False)
    disbursements_by_id: dict[int, DisbursementRecord] = field(init=False)
    positions: dict[int, LoanPosition] = field(init=False)

    def __post_init__(self):
        self.applications_by_id = index_by_id(self.applications)
        self.borrowers_by_id = index_by_id(self.borrowers)
        self.disbursements_by_id = index_by_id(self.disbursements)

        repayments_by_loan: dict[int, list[RepaymentRecord]] = defaultdict(list)
        for r in self.repayments:
            if r.is_reversed or r.disbursement_id is None:
                continue
            repayments_by_loan[r.disbursement_id].append(r)

        scheduled_interest: dict[int, Decimal] = defaultdict(Decimal)
        for s in self.payment_schedules:
            if s.deleted or s.disbursement_id is None:
                continue
            scheduled_interest[s.disbursement_id] += s.interest

        self.positions = {
            d.id: _position(d, repayments_by_loan.get(d.id, []), scheduled_interest.get(d.id, ZERO))
            for d in self.disbursements
            if d.id is not None
        }

    @classmethod
    def build(cls, source: RowSource) -> "PortfolioSnapshot":
        snapshot = cls(
            borrowers=source.borrowers(),
            applications=source.applications(),
            disbursements=source.disbursements(),
            repayments=source.repayments(),
            payment_schedules=source.payment_schedules(),
        )
        logger.debug(
            "Snapshot built: %d borrowers, %d applications, %d disbursements, %d repayments, %d schedule rows",
            len(snapshot.borrowers),
            len(snapshot.applications),
            len(snapshot.disbursements),
            len(snapshot.repayments),
            len(snapshot.payment_schedules),
        )
        return snapshot

    # -------------------------------------------------
    # Lookups
    # -------------------------------------------------
    def application_for(self, disbursement: Optional[DisbursementRecord]) -> Optional[ApplicationRecord]:
        if disbursement is None or disbursement.application_id is None:
            return None
        return self.applications_by_id.get(disbursement.application_id)

    def borrower_for(self, application: Optional[ApplicationRecord]) -> Optional[BorrowerRecord]:
        if application is None or application.borrower_id is None:
            return None
        return self.borrowers_by_id.get(application.borrower_id)

    def position(self, disbursement: DisbursementRecord) -> LoanPosition:
        pos = self.positions.get(disbursement.id) if disbursement.id is not None else None
        return pos or LoanPosition(loan_amount=money(disbursement.amount))

    def booked_loans(self) -> Iterator[tuple[DisbursementRecord, ApplicationRecord, Optional[BorrowerRecord]]]:
        """
        Disbursements joined to a live (non-deleted) application.

        Behaves like an inner join on applications and a left join on
        borrowers: loans without an application are dropped, loans whose
        borrower is missing come back with borrower=None.
        """
        for d in self.disbursements:
            application = self.application_for(d)
            if application is None or application.deleted:
                continue
            yield d, application, self.borrower_for(application)


def borrower_identity(uid: Optional[str], borrower_id: Optional[int]) -> Optional[str]:
    """Who counts as "the same borrower": external uid when known, else the numeric id."""
    if uid:
        return f"uid:{uid}"
    if borrower_id is not None:
        return f"id:{borrower_id}"
    return None
