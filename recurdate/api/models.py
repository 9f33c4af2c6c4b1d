"""API request/response models for recurdate."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from recurdate.models.recurrence import RecurrenceFrequency, RecurrenceRule


class ExpandResponse(BaseModel):
    """Response for full expansion."""
    dates: List[date]
    count: int
    truncated: bool = Field(False, description="True if the iteration cap cut the expansion short")


class PreviewResponse(BaseModel):
    """Response for a bounded preview."""
    dates: List[date] = Field(..., description="First `limit` dates of the expansion")
    total_count: int
    truncated: bool
    limit: int


class SaveResponse(BaseModel):
    """Saved configuration handed back to the caller for its own storage."""
    rule: RecurrenceRule
    start_date: date
    end_date: Optional[date]
    frequency: RecurrenceFrequency
    dates: List[date]
    count: int
    truncated: bool
    rrule: str
