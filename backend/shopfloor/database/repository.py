"""Repository for job documents."""

from datetime import date, timedelta
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from shopfloor.database.models import JobModel, COLLECTION_NAME


def date_range_filter(start: Optional[date], end: Optional[date]) -> dict:
    """
    Range filter over ISO date strings, inclusive of both calendar days.

    Stored values may be full timestamps ("2024-01-12T08:00:00Z"), which sort
    after the bare end date, so the upper bound is the start of the next day.
    """
    bounds = {}
    if start:
        bounds["$gte"] = start.isoformat()
    if end and end < date.max:
        bounds["$lt"] = (end + timedelta(days=1)).isoformat()
    return bounds


class JobRepository:
    """Read access to jobs for dashboards and reports."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[COLLECTION_NAME]

    async def _find(self, query: dict, sort: Optional[list] = None) -> list[JobModel]:
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)

        items = []
        async for doc in cursor:
            items.append(JobModel.from_document(doc))
        return items

    async def find_by_job_number(self, job_number: str) -> Optional[JobModel]:
        """Find a job by job number."""
        doc = await self.collection.find_one({"job_number": job_number})
        if doc:
            return JobModel.from_document(doc)
        return None

    async def find_all_schedules(self) -> list[JobModel]:
        """All jobs that have entered production."""
        return await self._find({"production_schedule": {"$exists": True}})

    async def find_in_production(
        self,
        sold_from: Optional[date] = None,
        sold_to: Optional[date] = None,
    ) -> list[JobModel]:
        """Jobs in the plant and not yet shipped, optionally by date sold."""
        query: dict = {
            "production_schedule.in_plant_actual": {"$nin": [None, ""]},
            "installation.has_shipped": {"$ne": True},
        }
        sold_range = date_range_filter(sold_from, sold_to)
        if sold_range:
            query["date_sold"] = sold_range

        return await self._find(query, sort=[("date_sold", -1)])

    async def find_by_ship_range(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[JobModel]:
        """Jobs whose ship date falls in the range, ascending by ship date."""
        ship_range = date_range_filter(start, end)
        query = {"production_schedule.ship_schedule": ship_range} if ship_range else {}
        return await self._find(query, sort=[("production_schedule.ship_schedule", 1)])
