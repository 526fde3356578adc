"""Ship-date status badges and shipping report grouping."""

import re
from datetime import date
from typing import Iterable, Optional

from shopfloor.database.models import JobModel, ProductionScheduleRecord, ShipStatus
from shopfloor.schemas.reports import (
    ShipDateGroup,
    ShippingReportJob,
    ShipStatusBadge,
    UpcomingShipment,
)

NO_DATE_KEY = "No Date"
NO_DATE_TITLE = "Unscheduled"
TBD = "TBD"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def effective_ship_status(record: ProductionScheduleRecord) -> ShipStatus:
    """Tentative/confirmed only mean something once a ship date is set."""
    if record.ship_schedule is None:
        return ShipStatus.UNPROCESSED
    return record.ship_status


def ship_status_badge(record: ProductionScheduleRecord) -> ShipStatusBadge:
    status = effective_ship_status(record)
    return ShipStatusBadge(
        status=status,
        label=status.value.upper(),
        date_display=record.ship_schedule.isoformat() if record.ship_schedule else TBD,
        is_rush=record.rush,
    )


def parse_box_count(box: Optional[str]) -> Optional[int]:
    """Leading integer of a free-text box count, e.g. "12 (+2 fillers)" -> 12."""
    if box is None:
        return 0
    match = _LEADING_INT.match(box)
    if not match:
        return None
    return int(match.group(1))


def group_by_ship_date(jobs: Iterable[ShippingReportJob]) -> list[ShipDateGroup]:
    """
    Group shipping report lines by ship date.

    Dated groups come first in ascending order, followed by a single
    "Unscheduled" group for jobs without a ship date. Box counts that do
    not start with a number are left out of the group total.
    """
    grouped: dict[Optional[date], list[ShippingReportJob]] = {}
    for job in jobs:
        grouped.setdefault(job.ship_schedule, []).append(job)

    dated_keys = sorted(key for key in grouped if key is not None)
    ordered_keys: list[Optional[date]] = list(dated_keys)
    if None in grouped:
        ordered_keys.append(None)

    groups = []
    for ship_date in ordered_keys:
        members = grouped[ship_date]
        box_total = 0
        for job in members:
            count = parse_box_count(job.box)
            if count is not None:
                box_total += count

        if ship_date is None:
            key, title, day_name = NO_DATE_KEY, NO_DATE_TITLE, ""
        else:
            key = ship_date.isoformat()
            title = ship_date.strftime("%d-%b-%y")
            day_name = ship_date.strftime("%A")

        groups.append(
            ShipDateGroup(
                key=key,
                title=title,
                day_name=day_name,
                box_total=box_total,
                jobs=members,
            )
        )
    return groups


def upcoming_shipments(
    jobs: Iterable[JobModel], today: date, limit: int = 5
) -> list[UpcomingShipment]:
    """Next scheduled ship dates on or after today."""
    scheduled = [
        job
        for job in jobs
        if job.production_schedule.ship_schedule is not None
        and job.production_schedule.ship_schedule >= today
    ]
    scheduled.sort(key=lambda job: job.production_schedule.ship_schedule)

    return [
        UpcomingShipment(
            job_number=job.job_number,
            ship_schedule=job.production_schedule.ship_schedule,
        )
        for job in scheduled[:limit]
    ]
