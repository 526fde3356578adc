import logging
from datetime import date
from typing import Optional

from shopfloor.database.repository import JobRepository
from shopfloor.database.models import JobModel
from shopfloor.schemas import (
    DashboardResponse,
    JobDetailsResponse,
    JobStatusRow,
    ShipDateGroup,
    ShippingReportJob,
)
from shopfloor.services.progress import (
    compute_job_completion_percentage,
    compute_step_progress,
    summarize_completion,
)
from shopfloor.services.purchasing import classify_job_purchasing
from shopfloor.services.shipping import (
    group_by_ship_date,
    ship_status_badge,
    upcoming_shipments,
)

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "Unknown"


class ReportService:
    """Service layer turning stored jobs into dashboard and report data."""

    def __init__(self, repository: JobRepository, upcoming_limit: int = 5):
        self.repository = repository
        self.upcoming_limit = upcoming_limit

    async def get_dashboard(self, today: date) -> DashboardResponse:
        """Plant throughput and the next scheduled shipments."""
        jobs = await self.repository.find_all_schedules()

        throughput = summarize_completion(job.production_schedule for job in jobs)
        logger.info(
            f"Dashboard: {throughput.finished} of {throughput.total} jobs finished"
        )

        return DashboardResponse(
            throughput=throughput,
            upcoming_shipments=upcoming_shipments(jobs, today, self.upcoming_limit),
        )

    async def get_job_status_report(
        self,
        sold_from: Optional[date] = None,
        sold_to: Optional[date] = None,
    ) -> list[JobStatusRow]:
        """Jobs in the plant that have not shipped, newest sale first."""
        jobs = await self.repository.find_in_production(sold_from, sold_to)

        in_plant = [
            job
            for job in jobs
            if job.production_schedule.in_plant_actual
            and not job.installation.has_shipped
        ]
        in_plant.sort(key=lambda job: job.date_sold or date.min, reverse=True)

        return [self._job_to_status_row(job) for job in in_plant]

    async def get_shipping_report(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[ShipDateGroup]:
        """Shipping report lines grouped by ship date."""
        jobs = await self.repository.find_by_ship_range(start, end)

        lines = [
            ShippingReportJob(
                job_number=job.job_number,
                client_name=job.shipping_client_name or UNKNOWN_CLIENT,
                shipping_address=job.shipping_address,
                ship_schedule=job.production_schedule.ship_schedule,
                box=job.box,
            )
            for job in jobs
        ]
        return group_by_ship_date(lines)

    async def get_job_details(self, job_number: str) -> Optional[JobDetailsResponse]:
        """Derived progress, shipping and purchasing state of one job."""
        job = await self.repository.find_by_job_number(job_number)
        if job is None:
            return None

        schedule = job.production_schedule
        return JobDetailsResponse(
            job_number=job.job_number,
            client_name=job.shipping_client_name or UNKNOWN_CLIENT,
            steps=compute_step_progress(schedule),
            completion_percentage=compute_job_completion_percentage(
                schedule, job.installation.wrap_completed
            ),
            ship=ship_status_badge(schedule),
            purchasing=classify_job_purchasing(job.purchase_tracking),
        )

    def _job_to_status_row(self, job: JobModel) -> JobStatusRow:
        schedule = job.production_schedule
        wrap = job.installation.wrap_completed or None
        return JobStatusRow(
            job_number=job.job_number,
            date_sold=job.date_sold,
            shipping_client_name=job.shipping_client_name or UNKNOWN_CLIENT,
            shipping_address=job.shipping_address,
            cut_melamine=schedule.cut_melamine_completed_actual,
            cut_finish=schedule.cut_finish_completed_actual,
            custom_finish=schedule.custom_finish_completed_actual,
            doors=schedule.doors_completed_actual,
            drawers=schedule.drawer_completed_actual,
            paint=schedule.paint_completed_actual,
            assembly=schedule.assembly_completed_actual,
            wrap=wrap,
            completion_percentage=compute_job_completion_percentage(schedule, wrap),
        )
