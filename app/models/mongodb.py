# app/models/mongodb.py
"""
Exercise Tracker MongoDB Document Models.

Beanie ODM models for MongoDB.
"""

from beanie import Document
from pydantic import Field
from datetime import datetime

from app.utils.dates import utcnow


class UserDocument(Document):
    """User model for MongoDB."""

    username: str = Field(..., min_length=1)

    class Settings:
        name = "users"  # Collection name in MongoDB

    class Config:
        json_schema_extra = {
            "example": {
                "username": "fcc_test"
            }
        }


class ExerciseDocument(Document):
    """Exercise log entry for MongoDB."""

    user_id: str  # hex ObjectId of the owning UserDocument, not enforced
    description: str = Field(..., min_length=1)
    duration: int  # minutes
    date: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "exercises"
        indexes = [
            "user_id",
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "description": "Morning run",
                "duration": 30,
                "date": "2024-01-15T00:00:00"
            }
        }
