# portfolio_reports/reports/catalogue.py
#
# The fixed, ordered list of reports and the two ways of rendering them:
# all descriptors at once for the dashboard, or one report in full.

import logging
from typing import Callable

from portfolio_reports.core.exceptions import UnknownReportError
from portfolio_reports.reports import (
    active_loans,
    all_loans,
    borrower_list,
    disbursement_summary,
    repayment_performance,
    upcoming_schedule,
)
from portfolio_reports.reports.context import ReportContext, ReportDetail
from portfolio_reports.schemas.report_schemas import ReportDescriptor

logger = logging.getLogger(__name__)

ReportBuilder = Callable[[ReportContext], ReportDetail]

# Dashboard order
REPORTS: dict[str, ReportBuilder] = {
    disbursement_summary.REPORT_ID: disbursement_summary.build_report,
    repayment_performance.REPORT_ID: repayment_performance.build_report,
    upcoming_schedule.REPORT_ID: upcoming_schedule.build_report,
    all_loans.REPORT_ID: all_loans.build_report,
    active_loans.REPORT_ID: active_loans.build_report,
    borrower_list.REPORT_ID: borrower_list.build_report,
}

REPORT_IDS = tuple(REPORTS)


def build_report_detail(report_id: str, ctx: ReportContext) -> ReportDetail:
    try:
        builder = REPORTS[report_id]
    except KeyError:
        raise UnknownReportError(report_id) from None
    return builder(ctx)


def build_catalogue(ctx: ReportContext) -> list[ReportDescriptor]:
    descriptors = [builder(ctx).descriptor for builder in REPORTS.values()]
    logger.debug("Catalogue built with %d reports", len(descriptors))
    return descriptors
