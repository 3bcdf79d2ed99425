# Automatically load all models so metadata knows them
from portfolio_reports.models.borrower_model import Borrower
from portfolio_reports.models.application_model import Application
from portfolio_reports.models.disbursement_model import Disbursement
from portfolio_reports.models.repayment_model import Repayment
from portfolio_reports.models.payment_schedule_model import PaymentSchedule
