# portfolio_reports/models/borrower_model.py

from sqlalchemy import Column, Integer, String, Date, Numeric
from portfolio_reports.utils.database import Base


class Borrower(Base):
    __tablename__ = "borrowers"

    id = Column(Integer, primary_key=True, index=True)
    uid = Column(String(20), nullable=True, index=True)  # national id / external reference

    name = Column(String(150), nullable=True)
    gender = Column(String(20), nullable=True)
    dob = Column(Date, nullable=True)
    annual_income = Column(Numeric(12, 2), nullable=True)

    # address parts
    blk = Column(String(20), nullable=True)
    street = Column(String(150), nullable=True)
    unit = Column(String(20), nullable=True)
    building = Column(String(150), nullable=True)
    pincode = Column(String(20), nullable=True)
    address1 = Column(String(255), nullable=True)

    email = Column(String(150), nullable=True)
    hand_phone = Column(String(50), nullable=True)
