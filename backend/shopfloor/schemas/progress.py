from pydantic import BaseModel
from typing import Optional


class StepStatus(BaseModel):
    """Completion state of one production step."""

    key: str
    label: str
    is_completed: bool
    completed_at: Optional[str] = None


class CompletionSummary(BaseModel):
    """Finished vs. incomplete jobs across a job set."""

    total: int
    finished: int
    incomplete: int
    percentage: int
