from datetime import date
from enum import Enum
from pydantic import BaseModel


class Direction(str, Enum):
    """Which way to count business days."""

    ADD = "add"
    SUBTRACT = "subtract"


class BusinessDateResponse(BaseModel):
    """Result of a business-date calculation."""

    start: date
    days: int
    direction: Direction
    target_date: str
