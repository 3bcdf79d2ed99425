# portfolio_reports/models/payment_schedule_model.py

from sqlalchemy import Column, Integer, String, Date, Numeric, Boolean, ForeignKey, Index
from portfolio_reports.utils.database import Base


class PaymentSchedule(Base):
    __tablename__ = "payment_schedule"

    __table_args__ = (
        Index("ix_payment_schedule_date", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    disbursement_id = Column(Integer, ForeignKey("disbursements.id"), nullable=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id"), nullable=True)

    date = Column(Date, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False, server_default="0")
    principal = Column(Numeric(12, 2), nullable=False, server_default="0")
    interest = Column(Numeric(12, 2), nullable=False, server_default="0")

    late_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    late_interest = Column(Numeric(12, 2), nullable=False, server_default="0")
    legal_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    renewal_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    contract_variation_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    cheque_dishonour_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    termination_fee = Column(Numeric(12, 2), nullable=False, server_default="0")

    skip = Column(Boolean, nullable=False, server_default="false")
    deleted = Column(Boolean, nullable=False, server_default="false")

    google_calendar_url = Column(String(500), nullable=True)
