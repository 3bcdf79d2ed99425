# portfolio_reports/models/disbursement_model.py

from sqlalchemy import Column, Integer, String, Date, Numeric, Text, ForeignKey, Index
from portfolio_reports.utils.database import Base


class Disbursement(Base):
    __tablename__ = "disbursements"

    __table_args__ = (
        Index("ix_disbursements_date", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="RESTRICT"), nullable=True, index=True)

    date = Column(Date, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False, server_default="0")

    # independent of the application's loan status
    status = Column(String(30), nullable=True)

    account_number = Column(String(50), nullable=True)
    installment_count = Column(Integer, nullable=True)  # tenure
    payment_frequency = Column("payment_frequency_id", String(30), nullable=True)
    branch = Column("book_id", String(30), nullable=True)

    remarks = Column(Text, nullable=True)
