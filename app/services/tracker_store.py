# app/services/tracker_store.py
"""
Exercise Tracker API - Tracker Store.

Thin data-access layer over the Beanie documents. Routes receive a store
through the `app.dependencies.get_tracker_store` dependency so tests can swap in a
substitute (e.g. one that raises to simulate a database outage).
"""

from datetime import datetime
from typing import List, Optional
import logging

from bson import ObjectId

from app.models.mongodb import UserDocument, ExerciseDocument

logger = logging.getLogger(__name__)


class TrackerStore:
    """
    Store operations for users and their exercises.

    Every method performs exactly one database round-trip and lets driver
    errors propagate to the caller.
    """

    async def create_user(self, username: str) -> UserDocument:
        """Insert a new user. Duplicate usernames are allowed."""
        user = UserDocument(username=username)
        await user.insert()
        logger.info(f"Created user {user.id}")
        return user

    async def list_users(self) -> List[UserDocument]:
        """Fetch all users in store order."""
        return await UserDocument.find_all().to_list()

    async def get_user(self, user_id: str) -> Optional[UserDocument]:
        """
        Find a user by id.

        Args:
            user_id: Hex ObjectId string from the request path.

        Returns:
            The user, or None if the id is malformed or unknown.
        """
        if not ObjectId.is_valid(user_id):
            return None
        return await UserDocument.get(ObjectId(user_id))

    async def add_exercise(
        self,
        user: UserDocument,
        description: str,
        duration: int,
        date: Optional[datetime] = None
    ) -> ExerciseDocument:
        """Insert an exercise for an existing user."""
        exercise = ExerciseDocument(
            user_id=str(user.id),
            description=description,
            duration=duration,
        )
        if date is not None:
            exercise.date = date
        await exercise.insert()
        logger.info(f"Logged exercise {exercise.id} for user {user.id}")
        return exercise

    async def find_exercises(
        self,
        user_id: str,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 500
    ) -> List[ExerciseDocument]:
        """
        Query a user's exercises, optionally bounded by date (inclusive).

        No sort is applied; results come back in store order.
        """
        conditions = [ExerciseDocument.user_id == user_id]
        if date_from is not None:
            conditions.append(ExerciseDocument.date >= date_from)
        if date_to is not None:
            conditions.append(ExerciseDocument.date <= date_to)

        return await ExerciseDocument.find(*conditions).limit(limit).to_list()
