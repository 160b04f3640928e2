"""
Exercise Tracker API - Exercise Schemas.

Pydantic schemas for logging exercises and reading a user's log.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.utils.dates import parse_date


class ExerciseCreate(BaseModel):
    """
    Schema for an exercise submission (form-encoded).

    Attributes:
        description: What was done.
        duration: Duration in minutes.
        date: Optional date; the submission time is used when absent.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "Morning run",
                "duration": 30,
                "date": "2024-01-15"
            }
        }
    )

    description: str = Field(..., min_length=1, description="Exercise description")
    duration: int = Field(..., description="Duration in minutes")
    date: Optional[datetime] = Field(
        None,
        description="Exercise date (yyyy-mm-dd); defaults to now"
    )

    @field_validator("date", mode="before")
    @classmethod
    def parse_date_string(cls, value):
        if isinstance(value, str):
            return parse_date(value)
        return value


class ExerciseOut(BaseModel):
    """
    Schema for a freshly logged exercise.

    Attributes:
        id: Owning user's ID.
        username: Owning user's username.
        description: Exercise description.
        duration: Duration in minutes.
        date: Human-readable date, e.g. "Mon Jan 15 2024".
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User's unique ID")
    username: str
    description: str
    duration: int
    date: str


class LogEntry(BaseModel):
    """One exercise in a user's log."""

    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    """
    Schema for a user's exercise log.

    Attributes:
        username: Owning user's username.
        count: Number of entries in `log` (after the limit is applied).
        id: Owning user's ID.
        log: Exercise entries in store order.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(..., alias="_id", description="User's unique ID")
    log: List[LogEntry] = Field(default_factory=list)
