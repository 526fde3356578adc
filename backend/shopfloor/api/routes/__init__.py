from fastapi import APIRouter

from shopfloor.api.routes import business_dates, health, jobs, progress, purchasing, reports

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(purchasing.router, prefix="/purchasing", tags=["purchasing"])
api_router.include_router(business_dates.router, prefix="/business-dates", tags=["business-dates"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
