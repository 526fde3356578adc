from shopfloor.schemas.progress import StepStatus, CompletionSummary
from shopfloor.schemas.purchasing import PurchaseState, PurchaseStatus
from shopfloor.schemas.business_dates import Direction, BusinessDateResponse
from shopfloor.schemas.reports import (
    ShipStatusBadge,
    ShippingReportJob,
    ShipDateGroup,
    UpcomingShipment,
    DashboardResponse,
    JobStatusRow,
    JobDetailsResponse,
)

__all__ = [
    "StepStatus",
    "CompletionSummary",
    "PurchaseState",
    "PurchaseStatus",
    "Direction",
    "BusinessDateResponse",
    "ShipStatusBadge",
    "ShippingReportJob",
    "ShipDateGroup",
    "UpcomingShipment",
    "DashboardResponse",
    "JobStatusRow",
    "JobDetailsResponse",
]
