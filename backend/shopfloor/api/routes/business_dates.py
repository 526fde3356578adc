from datetime import date

from fastapi import APIRouter

from shopfloor.schemas import BusinessDateResponse, Direction
from shopfloor.services.business_dates import calculate_business_date, format_business_date

router = APIRouter()


def _calculate(start: date, days: int, direction: str) -> BusinessDateResponse:
    # Raises InvalidArgumentError for bad input, answered with 400 by the app
    target = calculate_business_date(start, days, direction)
    return BusinessDateResponse(
        start=start,
        days=days,
        direction=Direction(direction),
        target_date=format_business_date(target),
    )


@router.get("/add", response_model=BusinessDateResponse)
async def add_days(start: date, days: int):
    """Date a number of business days after start."""
    return _calculate(start, days, Direction.ADD)


@router.get("/subtract", response_model=BusinessDateResponse)
async def subtract_days(start: date, days: int):
    """Date a number of business days before start."""
    return _calculate(start, days, Direction.SUBTRACT)


@router.get("/{direction}", response_model=BusinessDateResponse)
async def calculate(direction: str, start: date, days: int):
    """Generic form taking the direction from the path."""
    return _calculate(start, days, direction)
