"""
Checklist task models.

Tasks are derived from note content on every read and are never persisted.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Task(BaseModel):
    """One recognized checklist line."""

    model_config = {"frozen": True}

    text: str = Field(..., description="Line content after the checkbox marker, trimmed")
    completed: bool = Field(..., description="True for [x], False for [ ]")
    index: int = Field(..., ge=0, description="Ordinal among task lines, top to bottom")


class TaskFilter(str, Enum):
    """Task dashboard filters."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class TaskStats(BaseModel):
    """Task totals across a set of notes."""

    total: int = 0
    completed: int = 0
    pending: int = 0
    overdue: int = 0
    completion_rate: int = Field(default=0, ge=0, le=100, description="Completed percent, rounded")
