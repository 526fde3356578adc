from fastapi import APIRouter

from shopfloor.database import PurchasableItemStatus, PurchaseCategory, PurchaseTrackingRecord
from shopfloor.schemas import PurchaseStatus
from shopfloor.services.purchasing import classify_job_purchasing, classify_purchase_status

router = APIRouter()


@router.post("/status", response_model=PurchaseStatus)
async def get_purchase_status(item: PurchasableItemStatus, category: PurchaseCategory):
    """Classify one purchasable category."""
    return classify_purchase_status(item, category)


@router.post("/job", response_model=dict[PurchaseCategory, PurchaseStatus])
async def get_job_purchasing(record: PurchaseTrackingRecord):
    """Classify doors, glass, handles and accessories of a job."""
    return classify_job_purchasing(record)
