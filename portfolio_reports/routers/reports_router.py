from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from portfolio_reports.core.exceptions import UnknownReportError
from portfolio_reports.reports.catalogue import build_catalogue, build_report_detail
from portfolio_reports.reports.context import ReportContext, UpcomingMode
from portfolio_reports.reports.filters import resolve_filters
from portfolio_reports.reports.service import ReportDataset, load_report_dataset
from portfolio_reports.schemas.report_schemas import CatalogueData, CatalogueOut, FiltersOut, ReportDetailOut

router = APIRouter(prefix="/reports", tags=["Reports"])


def get_report_dataset() -> ReportDataset:
    # one dataset per request; falls back to static data on any store failure
    return load_report_dataset()


# =================================================
# 🔹 CATALOGUE (KEEP ABOVE /{report_id})
# =================================================
@router.get("", response_model=CatalogueOut)
def report_catalogue(
        start_date: Optional[str] = Query(None, alias="startDate"),
        end_date: Optional[str] = Query(None, alias="endDate"),
        upcoming_mode: UpcomingMode = Query(UpcomingMode.FROM_TODAY, alias="upcomingMode"),
        dataset: ReportDataset = Depends(get_report_dataset),
):
    # malformed dates silently become "no filter"
    filters = resolve_filters(start_date, end_date)
    ctx = ReportContext(snapshot=dataset.snapshot, filters=filters, upcoming_mode=upcoming_mode)

    return CatalogueOut(
        filters=FiltersOut(**filters.as_dict()),
        data=CatalogueData(reports=build_catalogue(ctx)),
        source=dataset.source,
        advisory=dataset.advisory,
    )


# =================================================
# 🔹 DETAIL VIEWS
# =================================================
@router.get("/{report_id}", response_model=ReportDetailOut)
def report_detail(
        report_id: str,
        start_date: Optional[str] = Query(None, alias="startDate"),
        end_date: Optional[str] = Query(None, alias="endDate"),
        mode: UpcomingMode = Query(UpcomingMode.FROM_TODAY),
        dataset: ReportDataset = Depends(get_report_dataset),
):
    filters = resolve_filters(start_date, end_date)
    ctx = ReportContext(snapshot=dataset.snapshot, filters=filters, upcoming_mode=mode)

    try:
        detail = build_report_detail(report_id, ctx)
    except UnknownReportError:
        raise HTTPException(status_code=404, detail="Report not found")

    return ReportDetailOut(
        report=detail.descriptor,
        filters=FiltersOut(**filters.as_dict()),
        rows=detail.rows,
        totals=detail.totals,
        source=dataset.source,
        advisory=dataset.advisory,
    )
