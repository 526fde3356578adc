from fastapi import APIRouter, Depends, HTTPException

from shopfloor.api.deps import get_report_service
from shopfloor.schemas import JobDetailsResponse
from shopfloor.services import ReportService

router = APIRouter()


@router.get("/{job_number}", response_model=JobDetailsResponse)
async def get_job(
    job_number: str,
    service: ReportService = Depends(get_report_service),
):
    """Derived progress, shipping and purchasing state of a job."""
    details = await service.get_job_details(job_number)
    if not details:
        raise HTTPException(status_code=404, detail="Job not found")
    return details
