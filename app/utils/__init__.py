"""Exercise Tracker API - Utilities Package."""

from app.utils.dates import format_date, parse_date, utcnow
from app.utils.errors import (
    ExerciseTrackerException,
    NotFoundError,
    ValidationError,
    StoreError,
)

__all__ = [
    "format_date",
    "parse_date",
    "utcnow",
    "ExerciseTrackerException",
    "NotFoundError",
    "ValidationError",
    "StoreError",
]
