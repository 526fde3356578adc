from enum import Enum
from pydantic import BaseModel


class PurchaseState(str, Enum):
    """Derived purchasing state, highest precedence first."""

    INCOMPLETE = "INCOMPLETE"
    RECEIVED = "RECEIVED"
    ORDERED = "ORDERED"
    NOT_ORDERED = "NOT_ORDERED"


class PurchaseStatus(BaseModel):
    """Classified status of one purchasable category."""

    state: PurchaseState
    display_label: str
    warning: bool = False
    badge_color: str
    badge_variant: str
