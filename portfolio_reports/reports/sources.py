# portfolio_reports/reports/sources.py
#
# Where report records come from. Both sources hand back the same record
# types; everything downstream is source-agnostic.

from typing import Mapping, Protocol, Sequence

from sqlalchemy.orm import Session

from portfolio_reports.data.static_dataset import STATIC_DATASET
from portfolio_reports.models import Application, Borrower, Disbursement, PaymentSchedule, Repayment
from portfolio_reports.schemas.record_schemas import (
    ApplicationRecord,
    BorrowerRecord,
    DisbursementRecord,
    PaymentScheduleRecord,
    RepaymentRecord,
)


class RowSource(Protocol):
    def borrowers(self) -> list[BorrowerRecord]: ...

    def applications(self) -> list[ApplicationRecord]: ...

    def disbursements(self) -> list[DisbursementRecord]: ...

    def repayments(self) -> list[RepaymentRecord]: ...

    def payment_schedules(self) -> list[PaymentScheduleRecord]: ...


class StaticRowSource:
    """Records from an in-memory dataset (defaults to the bundled sample)."""

    def __init__(self, dataset: Mapping[str, Sequence[dict]] = STATIC_DATASET):
        self.dataset = dataset

    def _validate(self, key: str, record_type):
        return [record_type.model_validate(row) for row in self.dataset.get(key, ())]

    def borrowers(self) -> list[BorrowerRecord]:
        return self._validate("borrowers", BorrowerRecord)

    def applications(self) -> list[ApplicationRecord]:
        return self._validate("applications", ApplicationRecord)

    def disbursements(self) -> list[DisbursementRecord]:
        return self._validate("disbursements", DisbursementRecord)

    def repayments(self) -> list[RepaymentRecord]:
        return self._validate("repayments", RepaymentRecord)

    def payment_schedules(self) -> list[PaymentScheduleRecord]:
        return self._validate("payment_schedules", PaymentScheduleRecord)


class SqlRowSource:
    """Records read from the live store through an open session."""

    def __init__(self, db: Session):
        self.db = db

    def _fetch(self, model, record_type):
        rows = self.db.query(model).order_by(model.id.asc()).all()
        return [record_type.model_validate(r) for r in rows]

    def borrowers(self) -> list[BorrowerRecord]:
        return self._fetch(Borrower, BorrowerRecord)

    def applications(self) -> list[ApplicationRecord]:
        return self._fetch(Application, ApplicationRecord)

    def disbursements(self) -> list[DisbursementRecord]:
        return self._fetch(Disbursement, DisbursementRecord)

    def repayments(self) -> list[RepaymentRecord]:
        return self._fetch(Repayment, RepaymentRecord)

    def payment_schedules(self) -> list[PaymentScheduleRecord]:
        return self._fetch(PaymentSchedule, PaymentScheduleRecord)
