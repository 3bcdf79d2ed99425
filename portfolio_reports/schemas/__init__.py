from portfolio_reports.schemas.record_schemas import (
    ApplicationRecord,
    BorrowerRecord,
    DisbursementRecord,
    PaymentScheduleRecord,
    RepaymentRecord,
)
from portfolio_reports.schemas.report_schemas import (
    ActiveLoanRow,
    BorrowerSummaryRow,
    CatalogueOut,
    DisbursementDayRow,
    FiltersOut,
    LoanDetailRow,
    Metric,
    RepaymentDayRow,
    ReportDescriptor,
    ReportDetailOut,
    UpcomingScheduleRow,
)
