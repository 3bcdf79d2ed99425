# portfolio_reports/schemas/report_schemas.py

import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel


# ----------------------------
# Catalogue
# ----------------------------
class Metric(BaseModel):
    label: str
    value: int | float
    formatted: str


class ReportDescriptor(BaseModel):
    id: str
    name: str
    description: str
    url: str
    openInNewTab: bool = True
    metrics: list[Metric]
    suggestedFilters: list[str]


class FiltersOut(BaseModel):
    startDate: Optional[str] = None
    endDate: Optional[str] = None


class CatalogueData(BaseModel):
    reports: list[ReportDescriptor]


class CatalogueOut(BaseModel):
    filters: FiltersOut
    data: CatalogueData
    source: Literal["live", "static"]
    advisory: Optional[str] = None


class ReportDetailOut(BaseModel):
    report: ReportDescriptor
    filters: FiltersOut
    rows: list[Any]
    totals: list[Metric]
    source: Literal["live", "static"]
    advisory: Optional[str] = None


# ----------------------------
# Detail rows
# ----------------------------
class DisbursementDayRow(BaseModel):
    date: datetime.date
    disbursement_count: int
    amount: float


class RepaymentDayRow(BaseModel):
    date: datetime.date
    repayment_count: int
    principal: float
    interest: float
    amount: float


class UpcomingScheduleRow(BaseModel):
    schedule_id: Optional[int] = None
    disbursement_id: Optional[int] = None
    date: datetime.date
    display_date: str

    amount: float
    principal: float
    interest: float
    late_fee: float
    late_interest: float
    legal_fee: float
    renewal_fee: float
    contract_variation_fee: float
    cheque_dishonour_fee: float
    termination_fee: float
    google_calendar_url: Optional[str] = None

    account_number: Optional[str] = None
    loan_amount: float

    borrower_name: str
    borrower_uid: Optional[str] = None
    borrower_phone: Optional[str] = None
    borrower_email: Optional[str] = None


class LoanDetailRow(BaseModel):
    disbursement_id: Optional[int] = None
    application_id: Optional[int] = None
    borrower_id: Optional[int] = None

    borrower_uid: Optional[str] = None
    borrower_name: str
    gender: Optional[str] = None
    dob: Optional[datetime.date] = None
    annual_income: float

    block: Optional[str] = None
    street: Optional[str] = None
    unit_no: Optional[str] = None
    building: Optional[str] = None
    postal: Optional[str] = None
    address: Optional[str] = None
    full_address: str
    borrower_email: Optional[str] = None
    borrower_phone: Optional[str] = None

    account_number: Optional[str] = None
    loan_date: Optional[datetime.date] = None
    loan_amount: float
    remarks: Optional[str] = None
    status: Optional[str] = None
    tenure: Optional[int] = None

    paid_principal: float
    os_principal: float
    os_interest: float
    profit: float
    interest_collected: float
    fees_collected: float
    last_paid_date: Optional[datetime.date] = None


class ActiveLoanRow(BaseModel):
    disbursement_id: Optional[int] = None
    application_id: Optional[int] = None
    borrower_id: Optional[int] = None

    borrower_uid: Optional[str] = None
    borrower_name: str
    borrower_phone: Optional[str] = None
    borrower_email: Optional[str] = None
    borrower_address: Optional[str] = None

    account_number: Optional[str] = None
    loan_date: Optional[datetime.date] = None
    loan_amount: float
    loan_frequency: Optional[str] = None
    branch: Optional[str] = None
    tenure: Optional[int] = None

    status: Optional[str] = None
    application_status: Optional[str] = None

    principal_repaid: float
    total_paid: float
    outstanding_principal: float
    last_payment_date: Optional[datetime.date] = None
    recent_payment: bool
    days_since_last_payment: Optional[int] = None
    days_since_label: str


class BorrowerSummaryRow(BaseModel):
    borrower_id: int
    uid: Optional[str] = None
    name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime.date] = None
    annual_income: Optional[float] = None

    blk: Optional[str] = None
    street: Optional[str] = None
    unit: Optional[str] = None
    building: Optional[str] = None
    pincode: Optional[str] = None
    address1: Optional[str] = None
    full_address: str
    email: Optional[str] = None
    hand_phone: Optional[str] = None

    loan_count: int
    total_loan_amount: float
    first_loan_date: Optional[datetime.date] = None
    last_loan_date: Optional[datetime.date] = None
