"""Purchasing status derivation for doors, glass, handles and accessories."""

from typing import Optional, Union

from shopfloor.database.models import (
    PurchasableItemStatus,
    PurchaseCategory,
    PurchaseTrackingRecord,
)
from shopfloor.schemas.purchasing import PurchaseState, PurchaseStatus


# state -> (display label, badge color, badge variant)
STATE_BADGES = {
    PurchaseState.INCOMPLETE: ("Incomplete", "orange", "filled"),
    PurchaseState.RECEIVED: ("Received", "green", "light"),
    PurchaseState.ORDERED: ("Ordered", "yellow", "outline"),
    PurchaseState.NOT_ORDERED: ("—", "red", "light"),
}


def _is_set(value: Optional[str]) -> bool:
    return bool(value)


def derive_purchase_state(item: PurchasableItemStatus) -> PurchaseState:
    """First match wins: incomplete receipt, full receipt, order, nothing."""
    if _is_set(item.received_incomplete_at):
        return PurchaseState.INCOMPLETE
    if _is_set(item.received_at):
        return PurchaseState.RECEIVED
    if _is_set(item.ordered_at):
        return PurchaseState.ORDERED
    return PurchaseState.NOT_ORDERED


def needs_outsourced_ordering(
    item: PurchasableItemStatus, category: Union[PurchaseCategory, str]
) -> bool:
    """Doors with a style that is not made in house have to be bought out."""
    return (
        category == PurchaseCategory.DOORS
        and _is_set(item.door_style_name)
        and not item.door_made_in_house
    )


def classify_purchase_status(
    item: PurchasableItemStatus, category: Union[PurchaseCategory, str]
) -> PurchaseStatus:
    """
    Classify one purchasable category of a job.

    The outsourced-door warning is independent of the state, so a door
    style that still has to be ordered warns while NOT_ORDERED.
    """
    state = derive_purchase_state(item)
    label, color, variant = STATE_BADGES[state]

    return PurchaseStatus(
        state=state,
        display_label=label,
        warning=needs_outsourced_ordering(item, category),
        badge_color=color,
        badge_variant=variant,
    )


def classify_job_purchasing(
    record: PurchaseTrackingRecord,
) -> dict[PurchaseCategory, PurchaseStatus]:
    """Statuses for every category, in purchasing table column order."""
    return {
        category: classify_purchase_status(record.item_status(category), category)
        for category in PurchaseCategory
    }
