"""
Shared fixtures: record factories and an in-memory job repository.
"""

from datetime import date
from typing import Optional

import pytest

from shopfloor.database.models import (
    InstallationRecord,
    JobModel,
    ProductionScheduleRecord,
    PurchaseTrackingRecord,
)

ALL_STEPS_DONE = {
    "in_plant_actual": "2024-01-02T08:00:00Z",
    "doors_completed_actual": "2024-01-03T10:00:00Z",
    "cut_finish_completed_actual": "2024-01-03T12:00:00Z",
    "custom_finish_completed_actual": "2024-01-04T09:00:00Z",
    "drawer_completed_actual": "2024-01-04T15:00:00Z",
    "cut_melamine_completed_actual": "2024-01-05T09:30:00Z",
    "paint_completed_actual": "2024-01-08T11:00:00Z",
    "assembly_completed_actual": "2024-01-09T16:00:00Z",
}


def make_schedule(**fields) -> ProductionScheduleRecord:
    return ProductionScheduleRecord(**fields)


def make_job(
    job_number: str,
    schedule: Optional[dict] = None,
    purchasing: Optional[dict] = None,
    installation: Optional[dict] = None,
    **fields,
) -> JobModel:
    return JobModel(
        job_number=job_number,
        production_schedule=ProductionScheduleRecord(**(schedule or {})),
        purchase_tracking=PurchaseTrackingRecord(**(purchasing or {})),
        installation=InstallationRecord(**(installation or {})),
        **fields,
    )


class FakeJobRepository:
    """In-memory stand-in for JobRepository."""

    def __init__(self, jobs: list[JobModel]):
        self.jobs = list(jobs)

    async def find_all_schedules(self) -> list[JobModel]:
        return list(self.jobs)

    async def find_by_job_number(self, job_number: str) -> Optional[JobModel]:
        for job in self.jobs:
            if job.job_number == job_number:
                return job
        return None

    async def find_in_production(
        self, sold_from: Optional[date] = None, sold_to: Optional[date] = None
    ) -> list[JobModel]:
        result = []
        for job in self.jobs:
            if sold_from and (job.date_sold is None or job.date_sold < sold_from):
                continue
            if sold_to and (job.date_sold is None or job.date_sold > sold_to):
                continue
            result.append(job)
        return result

    async def find_by_ship_range(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> list[JobModel]:
        result = []
        for job in self.jobs:
            ship = job.production_schedule.ship_schedule
            if (start or end) and ship is None:
                continue
            if start and ship < start:
                continue
            if end and ship > end:
                continue
            result.append(job)
        return result


@pytest.fixture
def finished_schedule() -> ProductionScheduleRecord:
    return make_schedule(**ALL_STEPS_DONE)


@pytest.fixture
def empty_schedule() -> ProductionScheduleRecord:
    return make_schedule()


@pytest.fixture
def sample_jobs() -> list[JobModel]:
    """Four jobs covering finished, in progress, shipped and not started."""
    return [
        make_job(
            "J-1001",
            schedule={**ALL_STEPS_DONE, "ship_schedule": "2024-01-15", "ship_status": "confirmed"},
            installation={"wrap_completed": "2024-01-10T10:00:00Z"},
            shipping_client_name="Harper Homes",
            shipping_street="12 Elm St",
            shipping_city="Calgary",
            shipping_province="AB",
            date_sold="2023-11-20",
            box="14",
        ),
        make_job(
            "J-1002",
            schedule={
                "in_plant_actual": "2024-01-03T08:00:00Z",
                "doors_completed_actual": "2024-01-04T08:00:00Z",
                "cut_finish_completed_actual": "2024-01-05T08:00:00Z",
                "ship_schedule": "2024-01-12",
                "ship_status": "tentative",
                "rush": True,
            },
            purchasing={
                "doors_ordered_at": "2023-12-20T09:00:00Z",
                "glass_ordered_at": "2023-12-20T09:00:00Z",
                "glass_received_at": "2024-01-02T09:00:00Z",
                "door_style_name": "Shaker",
                "door_made_in_house": False,
            },
            shipping_client_name="Ridge Renovations",
            date_sold="2023-12-01",
            box="8 (+2 fillers)",
        ),
        make_job(
            "J-1003",
            schedule={**ALL_STEPS_DONE, "ship_schedule": "2024-01-12"},
            installation={"has_shipped": True, "wrap_completed": "2024-01-10T12:00:00Z"},
            shipping_client_name="Lakeview Condos",
            date_sold="2023-10-05",
            box="see drawings",
        ),
        make_job(
            "J-1004",
            shipping_client_name=None,
            date_sold="2024-01-02",
        ),
    ]


@pytest.fixture
def fake_repository(sample_jobs) -> FakeJobRepository:
    return FakeJobRepository(sample_jobs)
