# portfolio_reports/models/application_model.py

from sqlalchemy import Column, Integer, String, Date, Numeric, Boolean, ForeignKey, Index
from portfolio_reports.utils.database import Base


class Application(Base):
    __tablename__ = "applications"

    __table_args__ = (
        Index("ix_applications_borrower_deleted", "borrower_id", "deleted"),
    )

    id = Column(Integer, primary_key=True, index=True)
    borrower_id = Column(Integer, ForeignKey("borrowers.id", ondelete="RESTRICT"), nullable=True)

    date = Column(Date, nullable=True)
    amount = Column(Numeric(12, 2), nullable=True)

    deleted = Column(Boolean, nullable=False, server_default="false")

    # Active / Pending / Cancelled / Canceled / Rejected / NULL
    loan_status = Column("loan_status_id", String(30), nullable=True)

    account_number = Column(String(50), nullable=True)
