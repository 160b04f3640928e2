"""
Exercise Tracker API - User Schemas.

Pydantic schemas for user creation and listing.
"""

from pydantic import BaseModel, Field, ConfigDict


class UserCreate(BaseModel):
    """
    Schema for creating a new user (form-encoded).

    Attributes:
        username: Display name; duplicates are allowed.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "fcc_test"
            }
        }
    )

    username: str = Field(..., min_length=1, description="Username")


class UserOut(BaseModel):
    """
    Schema for a user as returned by the API.

    Serialized with the Mongo-style `_id` key.

    Attributes:
        id: User's unique identifier (hex ObjectId).
        username: Username.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "fcc_test",
                "_id": "65a1f0c2e4b0a1b2c3d4e5f6"
            }
        }
    )

    username: str = Field(..., description="Username")
    id: str = Field(..., alias="_id", description="User's unique ID")
