# Database module
from shopfloor.database.connection import Database, database, get_database
from shopfloor.database.models import (
    JobModel,
    ProductionScheduleRecord,
    PurchasableItemStatus,
    PurchaseTrackingRecord,
    InstallationRecord,
    ShipStatus,
    PurchaseCategory,
    COLLECTION_NAME,
)
from shopfloor.database.repository import JobRepository

__all__ = [
    # Connection
    "Database",
    "database",
    "get_database",
    # Models
    "JobModel",
    "ProductionScheduleRecord",
    "PurchasableItemStatus",
    "PurchaseTrackingRecord",
    "InstallationRecord",
    "ShipStatus",
    "PurchaseCategory",
    "COLLECTION_NAME",
    # Repository
    "JobRepository",
]
