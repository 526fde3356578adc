"""
Business-day date arithmetic.

Counts Monday through Friday only; there is no holiday calendar. Used to
derive due dates such as a ship target from a placement date.
"""

from datetime import date, datetime, timedelta
from typing import Union

from shopfloor.exceptions import InvalidArgumentError
from shopfloor.schemas.business_dates import Direction

# date.weekday(): Monday=0 ... Saturday=5, Sunday=6
WEEKEND_DAYS = frozenset({5, 6})

ONE_DAY = timedelta(days=1)


def is_business_day(value: date) -> bool:
    """True for Monday through Friday."""
    return value.weekday() not in WEEKEND_DAYS


def _to_direction(direction: Union[Direction, str]) -> Direction:
    try:
        return Direction(direction)
    except ValueError:
        raise InvalidArgumentError(
            "direction",
            direction,
            f"Invalid direction: {direction!r}. Must be 'add' or 'subtract'",
        ) from None


def _out_of_range(start: str, days: int, direction: Direction) -> InvalidArgumentError:
    return InvalidArgumentError(
        "days",
        days,
        f"Cannot {direction.value} {days} business days from {start}: "
        "result is outside the supported date range",
    )


def calculate_business_date(
    start_date: Union[date, datetime],
    days: int,
    direction: Union[Direction, str],
) -> date:
    """
    Move ``days`` business days away from ``start_date``.

    Walks one calendar day at a time and only counts the days it lands on
    that are weekdays. With ``days == 0`` no step is taken, so the start
    date comes back unchanged even when it falls on a weekend.

    Args:
        start_date: Date to count from; the time of day of a datetime is ignored
        days: Number of business days, zero or more
        direction: Direction.ADD / "add" or Direction.SUBTRACT / "subtract"

    Returns:
        date: The resulting calendar date

    Raises:
        InvalidArgumentError: If days is negative or not an integer, the
            direction is not recognised, or the result would fall outside
            date.min..date.max
    """
    step_direction = _to_direction(direction)

    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidArgumentError("days", days, "Business day count must be an integer")
    if days < 0:
        raise InvalidArgumentError(
            "days", days, f"Business day count must not be negative, got {days}"
        )

    current = start_date.date() if isinstance(start_date, datetime) else start_date
    step = ONE_DAY if step_direction is Direction.ADD else -ONE_DAY

    # every business day is at least one calendar day away
    edge = date.max if step_direction is Direction.ADD else date.min
    if days > abs((edge - current).days):
        raise _out_of_range(current.isoformat(), days, step_direction)

    remaining = days
    try:
        while remaining > 0:
            current = current + step
            if is_business_day(current):
                remaining -= 1
    except OverflowError:
        raise _out_of_range(start_date.isoformat(), days, step_direction) from None

    return current


def add_business_days(start_date: Union[date, datetime], days: int) -> date:
    """Date ``days`` business days after ``start_date``."""
    return calculate_business_date(start_date, days, Direction.ADD)


def subtract_business_days(start_date: Union[date, datetime], days: int) -> date:
    """Date ``days`` business days before ``start_date``."""
    return calculate_business_date(start_date, days, Direction.SUBTRACT)


def format_business_date(value: date) -> str:
    """Serialize as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")
