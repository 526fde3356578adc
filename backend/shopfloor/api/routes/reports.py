from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from shopfloor.api.deps import get_report_service
from shopfloor.schemas import DashboardResponse, JobStatusRow, ShipDateGroup
from shopfloor.services import ReportService
from shopfloor.utils.excel_utils import job_status_report_to_excel

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(service: ReportService = Depends(get_report_service)):
    """Plant throughput and upcoming shipments."""
    return await service.get_dashboard(date.today())


@router.get("/job-status", response_model=list[JobStatusRow])
async def get_job_status(
    sold_from: Optional[date] = None,
    sold_to: Optional[date] = None,
    service: ReportService = Depends(get_report_service),
):
    """Progress of every job in the plant that has not shipped."""
    return await service.get_job_status_report(sold_from, sold_to)


@router.get("/job-status/export")
async def export_job_status(
    sold_from: Optional[date] = None,
    sold_to: Optional[date] = None,
    service: ReportService = Depends(get_report_service),
):
    """Job status report as an Excel workbook."""
    rows = await service.get_job_status_report(sold_from, sold_to)
    filename = f"job-status-{date.today().isoformat()}.xlsx"
    return Response(
        content=job_status_report_to_excel(rows),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/shipping", response_model=list[ShipDateGroup])
async def get_shipping_report(
    start: Optional[date] = None,
    end: Optional[date] = None,
    service: ReportService = Depends(get_report_service),
):
    """Jobs shipping in a date range, grouped by ship date."""
    return await service.get_shipping_report(start, end)
