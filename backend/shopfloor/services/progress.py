"""
Production progress tracking.

Per-job step completion in the order the shop floor works through a job,
and completion figures across a set of jobs.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple, Optional

from shopfloor.database.models import ProductionScheduleRecord
from shopfloor.schemas.progress import CompletionSummary, StepStatus

logger = logging.getLogger(__name__)


class StepDefinition(NamedTuple):
    key: str
    label: str
    field: str


STEP_DEFINITIONS: tuple[StepDefinition, ...] = (
    StepDefinition("in_plant", "In Plant", "in_plant_actual"),
    StepDefinition("doors", "Doors", "doors_completed_actual"),
    StepDefinition("cut_finish", "Cut Finish", "cut_finish_completed_actual"),
    StepDefinition("custom_finish", "Custom Finish", "custom_finish_completed_actual"),
    StepDefinition("drawer", "Drawer", "drawer_completed_actual"),
    StepDefinition("cut_melamine", "Cut Melamine", "cut_melamine_completed_actual"),
    StepDefinition("paint", "Paint", "paint_completed_actual"),
    StepDefinition("assembly", "Assembly", "assembly_completed_actual"),
)

# A job counts as finished once assembly is done
FINAL_STEP_FIELD = "assembly_completed_actual"

# Steps of the job status report; in-plant is a precondition there, and the
# installation wrap is counted as the last step
JOB_STATUS_STEP_FIELDS: tuple[str, ...] = (
    "cut_melamine_completed_actual",
    "cut_finish_completed_actual",
    "custom_finish_completed_actual",
    "doors_completed_actual",
    "drawer_completed_actual",
    "paint_completed_actual",
    "assembly_completed_actual",
)
JOB_STATUS_STEP_COUNT = len(JOB_STATUS_STEP_FIELDS) + 1


def is_step_completed(value: Optional[str]) -> bool:
    """A step is done once it carries a non-empty timestamp."""
    return bool(value)


def round_percentage(part: int, whole: int) -> int:
    """part/whole as a 0-100 integer, halves rounded up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_step_progress(record: ProductionScheduleRecord) -> list[StepStatus]:
    """Completed/pending flag for every step, in canonical order."""
    steps = []
    for definition in STEP_DEFINITIONS:
        value = getattr(record, definition.field, None)
        done = is_step_completed(value)
        steps.append(
            StepStatus(
                key=definition.key,
                label=definition.label,
                is_completed=done,
                completed_at=value if done else None,
            )
        )
    return steps


def is_job_finished(record: ProductionScheduleRecord) -> bool:
    return is_step_completed(getattr(record, FINAL_STEP_FIELD, None))


def summarize_completion(
    records: Iterable[ProductionScheduleRecord],
) -> CompletionSummary:
    """Finished (assembly done) versus incomplete jobs."""
    total = 0
    finished = 0
    for record in records:
        total += 1
        if is_job_finished(record):
            finished += 1

    summary = CompletionSummary(
        total=total,
        finished=finished,
        incomplete=total - finished,
        percentage=round_percentage(finished, total),
    )
    logger.debug(
        f"Completion summary: {summary.finished}/{summary.total} finished "
        f"({summary.percentage}%)"
    )
    return summary


def compute_completion_percentage(
    records: Iterable[ProductionScheduleRecord],
) -> int:
    """Share of jobs with assembly completed, 0-100; 0 for no jobs."""
    return summarize_completion(records).percentage


def compute_job_completion_percentage(
    record: ProductionScheduleRecord,
    wrap_completed: Optional[str] = None,
) -> int:
    """Progress of a single job over the report steps plus wrap."""
    completed = sum(
        1 for field in JOB_STATUS_STEP_FIELDS if is_step_completed(getattr(record, field))
    )
    if is_step_completed(wrap_completed):
        completed += 1
    return round_percentage(completed, JOB_STATUS_STEP_COUNT)
