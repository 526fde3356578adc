from fastapi import APIRouter

from shopfloor.database import ProductionScheduleRecord
from shopfloor.schemas import CompletionSummary, StepStatus
from shopfloor.services.progress import compute_step_progress, summarize_completion

router = APIRouter()


@router.post("/steps", response_model=list[StepStatus])
async def get_step_progress(record: ProductionScheduleRecord):
    """Per-step completion of a production schedule."""
    return compute_step_progress(record)


@router.post("/completion", response_model=CompletionSummary)
async def get_completion(records: list[ProductionScheduleRecord]):
    """Share of jobs with assembly completed."""
    return summarize_completion(records)
