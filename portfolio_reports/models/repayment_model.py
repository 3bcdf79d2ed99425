# portfolio_reports/models/repayment_model.py

from sqlalchemy import Column, Integer, String, Date, Numeric, Boolean, ForeignKey, Index
from portfolio_reports.utils.database import Base


class Repayment(Base):
    __tablename__ = "repayments"

    __table_args__ = (
        Index("ix_repayments_disbursement_date", "disbursement_id", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    disbursement_id = Column(Integer, ForeignKey("disbursements.id"), nullable=True, index=True)

    date = Column(Date, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False, server_default="0")
    principal = Column(Numeric(12, 2), nullable=False, server_default="0")
    interest = Column(Numeric(12, 2), nullable=False, server_default="0")

    # fee components
    legal_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    acceptance_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    contract_variation_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    cheque_dishonoured_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    termination_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    renewal_fee = Column(Numeric(12, 2), nullable=False, server_default="0")
    late_fee = Column(Numeric(12, 2), nullable=False, server_default="0")

    # "1" marks a bounced / reversed payment
    cheque_dishonour = Column(String(1), nullable=True, server_default="0")
    deleted = Column(Boolean, nullable=False, server_default="false")
