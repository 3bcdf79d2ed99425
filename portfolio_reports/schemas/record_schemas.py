# portfolio_reports/schemas/record_schemas.py
#
# One immutable record per entity. ORM rows (live store) and plain dicts
# (static dataset) both validate into these, so report code never knows
# where a record came from.

import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_validator

FEE_FIELDS = (
    "legal_fee",
    "acceptance_fee",
    "contract_variation_fee",
    "cheque_dishonoured_fee",
    "termination_fee",
    "renewal_fee",
    "late_fee",
)


class _Record(BaseModel):
    class Config:
        from_attributes = True
        frozen = True


class BorrowerRecord(_Record):
    id: Optional[int] = None
    uid: Optional[str] = None
    name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime.date] = None
    annual_income: Optional[Decimal] = None

    blk: Optional[str] = None
    street: Optional[str] = None
    unit: Optional[str] = None
    building: Optional[str] = None
    pincode: Optional[str] = None
    address1: Optional[str] = None

    email: Optional[str] = None
    hand_phone: Optional[str] = None

    @field_validator("uid", "name", "email", "hand_phone", mode="before")
    def empty_to_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None


class ApplicationRecord(_Record):
    id: Optional[int] = None
    borrower_id: Optional[int] = None
    date: Optional[datetime.date] = None
    amount: Optional[Decimal] = None
    deleted: bool = False
    loan_status: Optional[str] = None
    account_number: Optional[str] = None


class DisbursementRecord(_Record):
    id: Optional[int] = None
    application_id: Optional[int] = None
    date: Optional[datetime.date] = None
    amount: Decimal = Decimal("0")
    status: Optional[str] = None
    account_number: Optional[str] = None
    installment_count: Optional[int] = None
    payment_frequency: Optional[str] = None
    branch: Optional[str] = None
    remarks: Optional[str] = None

    @field_validator("amount", mode="before")
    def none_to_zero(cls, v):
        return 0 if v is None else v


class RepaymentRecord(_Record):
    id: Optional[int] = None
    disbursement_id: Optional[int] = None
    date: Optional[datetime.date] = None
    amount: Decimal = Decimal("0")
    principal: Decimal = Decimal("0")
    interest: Decimal = Decimal("0")

    legal_fee: Decimal = Decimal("0")
    acceptance_fee: Decimal = Decimal("0")
    contract_variation_fee: Decimal = Decimal("0")
    cheque_dishonoured_fee: Decimal = Decimal("0")
    termination_fee: Decimal = Decimal("0")
    renewal_fee: Decimal = Decimal("0")
    late_fee: Decimal = Decimal("0")

    cheque_dishonour: Optional[str] = None
    deleted: bool = False

    @field_validator("amount", "principal", "interest", *FEE_FIELDS, mode="before")
    def none_to_zero(cls, v):
        return 0 if v is None else v

    @field_validator("cheque_dishonour", mode="before")
    def flag_to_str(cls, v):
        return None if v is None else str(v).strip()

    @property
    def is_reversed(self) -> bool:
        """Deleted or bounced payments count as if they never happened."""
        return self.deleted or self.cheque_dishonour == "1"

    @property
    def fees_total(self) -> Decimal:
        return sum((getattr(self, name) for name in FEE_FIELDS), Decimal("0"))


class PaymentScheduleRecord(_Record):
    id: Optional[int] = None
    disbursement_id: Optional[int] = None
    application_id: Optional[int] = None
    date: Optional[datetime.date] = None
    amount: Decimal = Decimal("0")
    principal: Decimal = Decimal("0")
    interest: Decimal = Decimal("0")

    late_fee: Decimal = Decimal("0")
    late_interest: Decimal = Decimal("0")
    legal_fee: Decimal = Decimal("0")
    renewal_fee: Decimal = Decimal("0")
    contract_variation_fee: Decimal = Decimal("0")
    cheque_dishonour_fee: Decimal = Decimal("0")
    termination_fee: Decimal = Decimal("0")

    skip: bool = False
    deleted: bool = False
    google_calendar_url: Optional[str] = None

    @field_validator(
        "amount",
        "principal",
        "interest",
        "late_fee",
        "late_interest",
        "legal_fee",
        "renewal_fee",
        "contract_variation_fee",
        "cheque_dishonour_fee",
        "termination_fee",
        mode="before",
    )
    def none_to_zero(cls, v):
        return 0 if v is None else v
