from fastapi import Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from shopfloor.config import Settings, get_settings
from shopfloor.database import JobRepository, get_database
from shopfloor.services import ReportService


async def get_db() -> AsyncIOMotorDatabase:
    """Database dependency that answers 503 until MongoDB is connected."""
    try:
        return await get_database()
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e))


def get_report_service(
    db: AsyncIOMotorDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ReportService:
    return ReportService(
        JobRepository(db),
        upcoming_limit=settings.upcoming_shipments_limit,
    )
