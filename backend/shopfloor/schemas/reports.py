from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

from shopfloor.database.models import PurchaseCategory, ShipStatus
from shopfloor.schemas.progress import CompletionSummary, StepStatus
from shopfloor.schemas.purchasing import PurchaseStatus


class ShipStatusBadge(BaseModel):
    """Ship date cell of the production table."""

    status: ShipStatus
    label: str
    date_display: str
    is_rush: bool = False


class ShippingReportJob(BaseModel):
    """One job line of the shipping report."""

    job_number: str
    client_name: str
    shipping_address: str = ""
    ship_schedule: Optional[date] = None
    box: Optional[str] = None


class ShipDateGroup(BaseModel):
    """Jobs shipping on the same date."""

    key: str
    title: str
    day_name: str = ""
    box_total: int = 0
    jobs: list[ShippingReportJob] = Field(default_factory=list)


class UpcomingShipment(BaseModel):
    job_number: str
    ship_schedule: date


class DashboardResponse(BaseModel):
    """Manager dashboard production figures."""

    throughput: CompletionSummary
    upcoming_shipments: list[UpcomingShipment]


class JobStatusRow(BaseModel):
    """One row of the job status report."""

    job_number: str
    date_sold: Optional[date] = None
    shipping_client_name: str
    shipping_address: str
    cut_melamine: Optional[str] = None
    cut_finish: Optional[str] = None
    custom_finish: Optional[str] = None
    doors: Optional[str] = None
    drawers: Optional[str] = None
    paint: Optional[str] = None
    assembly: Optional[str] = None
    wrap: Optional[str] = None
    completion_percentage: int


class JobDetailsResponse(BaseModel):
    """Everything the job drawer derives for a single job."""

    job_number: str
    client_name: str
    steps: list[StepStatus]
    completion_percentage: int
    ship: ShipStatusBadge
    purchasing: dict[PurchaseCategory, PurchaseStatus]
