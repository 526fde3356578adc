"""Job database models for MongoDB."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, field_validator
from bson import ObjectId


# Collection name
COLLECTION_NAME = "jobs"


class ShipStatus(str, Enum):
    """Shipping confirmation state of a production schedule."""

    UNPROCESSED = "unprocessed"
    TENTATIVE = "tentative"
    CONFIRMED = "confirmed"


class PurchaseCategory(str, Enum):
    """Independently ordered and received parts of a job."""

    DOORS = "doors"
    GLASS = "glass"
    HANDLES = "handles"
    ACCESSORIES = "accessories"


# Stored column prefix per category; accessories live under "acc_"
PURCHASE_FIELD_PREFIXES = {
    PurchaseCategory.DOORS: "doors",
    PurchaseCategory.GLASS: "glass",
    PurchaseCategory.HANDLES: "handles",
    PurchaseCategory.ACCESSORIES: "acc",
}


def coerce_date(value: Any) -> Any:
    """Reduce timestamps to their calendar date before validation."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        # "2024-01-05T08:00:00Z" -> "2024-01-05"
        return value[:10]
    return value


class ProductionScheduleRecord(BaseModel):
    """Manufacturing progress of one job."""

    in_plant_actual: Optional[str] = None
    doors_completed_actual: Optional[str] = None
    cut_finish_completed_actual: Optional[str] = None
    custom_finish_completed_actual: Optional[str] = None
    drawer_completed_actual: Optional[str] = None
    cut_melamine_completed_actual: Optional[str] = None
    paint_completed_actual: Optional[str] = None
    assembly_completed_actual: Optional[str] = None

    rush: bool = False
    ship_schedule: Optional[date] = None
    ship_status: ShipStatus = ShipStatus.UNPROCESSED

    placement_date: Optional[date] = None
    box_assembled_count: int = 0
    production_comments: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("ship_schedule", "placement_date", mode="before")
    @classmethod
    def _truncate_dates(cls, value: Any) -> Any:
        return coerce_date(value)


class PurchasableItemStatus(BaseModel):
    """Order/receipt timestamps of one purchasable category."""

    ordered_at: Optional[str] = None
    received_at: Optional[str] = None
    received_incomplete_at: Optional[str] = None

    # Only meaningful for doors
    door_style_name: Optional[str] = None
    door_made_in_house: bool = False


class PurchaseTrackingRecord(BaseModel):
    """Purchasing row of one job, one timestamp triple per category."""

    doors_ordered_at: Optional[str] = None
    doors_received_at: Optional[str] = None
    doors_received_incomplete_at: Optional[str] = None

    glass_ordered_at: Optional[str] = None
    glass_received_at: Optional[str] = None
    glass_received_incomplete_at: Optional[str] = None

    handles_ordered_at: Optional[str] = None
    handles_received_at: Optional[str] = None
    handles_received_incomplete_at: Optional[str] = None

    acc_ordered_at: Optional[str] = None
    acc_received_at: Optional[str] = None
    acc_received_incomplete_at: Optional[str] = None

    door_style_name: Optional[str] = None
    door_made_in_house: bool = False
    purchasing_comments: Optional[str] = None

    def item_status(self, category: Union[PurchaseCategory, str]) -> PurchasableItemStatus:
        """Project the timestamps of a single category."""
        prefix = PURCHASE_FIELD_PREFIXES[PurchaseCategory(category)]
        return PurchasableItemStatus(
            ordered_at=getattr(self, f"{prefix}_ordered_at"),
            received_at=getattr(self, f"{prefix}_received_at"),
            received_incomplete_at=getattr(self, f"{prefix}_received_incomplete_at"),
            door_style_name=self.door_style_name,
            door_made_in_house=self.door_made_in_house,
        )


class InstallationRecord(BaseModel):
    """Wrap, shipping and installation milestones of a job."""

    wrap_date: Optional[date] = None
    wrap_completed: Optional[str] = None
    has_shipped: bool = False
    installation_date: Optional[date] = None
    installation_completed: Optional[str] = None
    inspection_completed: Optional[str] = None

    @field_validator("wrap_date", "installation_date", mode="before")
    @classmethod
    def _truncate_dates(cls, value: Any) -> Any:
        return coerce_date(value)


class JobModel(BaseModel):
    """MongoDB document model for a job and its tracking rows."""

    id: Optional[str] = Field(default=None, alias="_id")

    job_number: str
    shipping_client_name: Optional[str] = None
    shipping_street: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_province: Optional[str] = None
    shipping_zip: Optional[str] = None

    date_sold: Optional[date] = None
    box: Optional[str] = None

    production_schedule: ProductionScheduleRecord = Field(
        default_factory=ProductionScheduleRecord
    )
    purchase_tracking: PurchaseTrackingRecord = Field(
        default_factory=PurchaseTrackingRecord
    )
    installation: InstallationRecord = Field(default_factory=InstallationRecord)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
        json_encoders = {ObjectId: str}

    @field_validator("date_sold", mode="before")
    @classmethod
    def _truncate_dates(cls, value: Any) -> Any:
        return coerce_date(value)

    @property
    def shipping_address(self) -> str:
        parts = [
            self.shipping_street,
            self.shipping_city,
            self.shipping_province,
            self.shipping_zip,
        ]
        return ", ".join(part for part in parts if part)

    @classmethod
    def from_document(cls, doc: dict) -> "JobModel":
        """Create model instance from MongoDB document."""
        if doc and "_id" in doc:
            doc["_id"] = str(doc["_id"])
        return cls(**doc)
