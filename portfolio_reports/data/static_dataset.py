# portfolio_reports/data/static_dataset.py
#
# Fixed sample records served when the live store cannot be reached.
# Field names match the record schemas (and therefore the ORM models), so
# the same report code runs over either source.

BORROWERS = (
    {
        "id": 1001,
        "uid": "S9012345A",
        "name": "Alicia Tan",
        "gender": "Female",
        "dob": "1990-04-14",
        "annual_income": 62000.0,
        "blk": "123",
        "street": "Serangoon Ave 3",
        "unit": "05-12",
        "building": "Golden Court",
        "pincode": "550123",
        "address1": "123 Serangoon Ave 3",
        "email": "alicia.tan@example.com",
        "hand_phone": "+65 8123 4567",
    },
    {
        "id": 1002,
        "uid": "S8912345B",
        "name": "Benjamin Singh",
        "gender": "Male",
        "dob": "1989-08-02",
        "annual_income": 78000.0,
        "blk": "88",
        "street": "Bedok North St 4",
        "unit": "12-21",
        "building": "Vista Towers",
        "pincode": "460088",
        "address1": "88 Bedok North St 4",
        "email": "ben.singh@example.com",
        "hand_phone": "+65 8234 5678",
    },
    {
        "id": 1003,
        "uid": "S9001234C",
        "name": "Celine Koh",
        "gender": "Female",
        "dob": "1992-01-26",
        "annual_income": 54000.0,
        "blk": "18",
        "street": "Jurong West Ave 1",
        "unit": "03-08",
        "building": "Lakefront Residences",
        "pincode": "640018",
        "address1": "18 Jurong West Ave 1",
        "email": "celine.koh@example.com",
        "hand_phone": "+65 8345 6789",
    },
    {
        "id": 1004,
        "uid": "S8801234D",
        "name": "Daniel Lim",
        "gender": "Male",
        "dob": "1988-11-09",
        "annual_income": 47000.0,
        "blk": "402",
        "street": "Tampines St 41",
        "unit": "09-14",
        "building": None,
        "pincode": "520402",
        "address1": "402 Tampines St 41",
        "email": "daniel.lim@example.com",
        "hand_phone": "+65 8456 7890",
    },
)

APPLICATIONS = (
    {"id": 2001, "borrower_id": 1001, "date": "2024-03-01", "amount": 5000.0, "deleted": False,
     "loan_status": "Active", "account_number": "APP-2024-001"},
    {"id": 2002, "borrower_id": 1002, "date": "2024-04-15", "amount": 12000.0, "deleted": False,
     "loan_status": "Active", "account_number": "APP-2024-002"},
    {"id": 2003, "borrower_id": 1003, "date": "2024-05-08", "amount": 8000.0, "deleted": False,
     "loan_status": "Pending", "account_number": "APP-2024-003"},
    # withdrawn application: its disbursement never shows up in a report
    {"id": 2004, "borrower_id": 1004, "date": "2024-06-02", "amount": 3000.0, "deleted": True,
     "loan_status": "Cancelled", "account_number": "APP-2024-004"},
)

DISBURSEMENTS = (
    {
        "id": 5001,
        "application_id": 2001,
        "date": "2024-03-05",
        "amount": 5000.0,
        "status": "Active",
        "account_number": "LN-2024-001",
        "installment_count": 12,
        "payment_frequency": "Monthly",
        "branch": "HQ",
        "remarks": "On track with repayments.",
    },
    {
        "id": 5002,
        "application_id": 2002,
        "date": "2024-04-20",
        "amount": 12000.0,
        "status": "Active",
        "account_number": "LN-2024-002",
        "installment_count": 18,
        "payment_frequency": "Monthly",
        "branch": "HQ",
        "remarks": "Eligible for top up review.",
    },
    {
        "id": 5003,
        "application_id": 2003,
        "date": "2024-05-12",
        "amount": 8000.0,
        "status": "In arrears",
        "account_number": "LN-2024-003",
        "installment_count": 15,
        "payment_frequency": "Monthly",
        "branch": "East",
        "remarks": "Watch late fees.",
    },
    {
        "id": 5004,
        "application_id": 2004,
        "date": "2024-06-05",
        "amount": 3000.0,
        "status": "Cancelled",
        "account_number": "LN-2024-004",
        "installment_count": 6,
        "payment_frequency": "Monthly",
        "branch": "East",
        "remarks": "Application withdrawn.",
    },
)


def _repayment(record_id, disbursement_id, date, amount, principal, interest,
               acceptance_fee=0.0, late_fee=0.0, cheque_dishonour="0", deleted=False):
    return {
        "id": record_id,
        "disbursement_id": disbursement_id,
        "date": date,
        "amount": amount,
        "principal": principal,
        "interest": interest,
        "legal_fee": 0.0,
        "acceptance_fee": acceptance_fee,
        "contract_variation_fee": 0.0,
        "cheque_dishonoured_fee": 0.0,
        "termination_fee": 0.0,
        "renewal_fee": 0.0,
        "late_fee": late_fee,
        "cheque_dishonour": cheque_dishonour,
        "deleted": deleted,
    }


REPAYMENTS = (
    _repayment(8001, 5001, "2024-04-04", 2600.0, 2500.0, 80.0, acceptance_fee=20.0),
    _repayment(8002, 5001, "2024-05-04", 2600.0, 2500.0, 80.0),
    _repayment(8003, 5002, "2024-05-19", 6100.0, 6000.0, 90.0, acceptance_fee=10.0),
    _repayment(8004, 5003, "2024-06-10", 0.0, 0.0, 0.0, late_fee=45.0),
    # bounced cheque
    _repayment(8005, 5002, "2024-06-19", 6100.0, 6000.0, 100.0, cheque_dishonour="1"),
)


def _schedule(record_id, disbursement_id, date, amount, principal, interest, skip=False, deleted=False):
    return {
        "id": record_id,
        "disbursement_id": disbursement_id,
        "application_id": None,
        "date": date,
        "amount": amount,
        "principal": principal,
        "interest": interest,
        "late_fee": 0.0,
        "late_interest": 0.0,
        "legal_fee": 0.0,
        "renewal_fee": 0.0,
        "contract_variation_fee": 0.0,
        "cheque_dishonour_fee": 0.0,
        "termination_fee": 0.0,
        "skip": skip,
        "deleted": deleted,
        "google_calendar_url": None,
    }


PAYMENT_SCHEDULES = (
    _schedule(7001, 5001, "2024-04-05", 2600.0, 2440.0, 160.0),
    _schedule(7002, 5001, "2024-05-05", 2600.0, 2440.0, 160.0),
    _schedule(7003, 5002, "2024-05-20", 6100.0, 5860.0, 240.0),
    _schedule(7004, 5002, "2024-06-20", 6100.0, 5860.0, 240.0),
    _schedule(7005, 5003, "2024-06-12", 3200.0, 2990.0, 210.0),
    _schedule(7006, 5003, "2024-07-12", 3200.0, 2990.0, 210.0, skip=True),
    _schedule(7007, 5002, "2024-07-20", 6100.0, 5860.0, 240.0, deleted=True),
)

STATIC_DATASET = {
    "borrowers": BORROWERS,
    "applications": APPLICATIONS,
    "disbursements": DISBURSEMENTS,
    "repayments": REPAYMENTS,
    "payment_schedules": PAYMENT_SCHEDULES,
}
