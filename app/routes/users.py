# app/routes/users.py
"""
Exercise Tracker API - User & Exercise Routes (MongoDB).

Create/list users, log exercises and read a user's exercise log.
"""

from typing import Annotated, List, Optional
import logging

from fastapi import APIRouter, Depends, Form, Query
from fastapi.responses import PlainTextResponse

from app.dependencies import get_tracker_store, legacy_responses_enabled
from app.schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseOut, LogEntry
from app.schemas.user import UserCreate, UserOut
from app.services.tracker_store import TrackerStore
from app.utils.dates import format_date, parse_date
from app.utils.errors import NotFoundError, StoreError, ValidationError
from settings import settings

logger = logging.getLogger(__name__)
router = APIRouter()

USER_NOT_FOUND = "Could not find user"
NO_USERS = "No users"


def resolve_limit(raw: Optional[str], maximum: int) -> int:
    """
    Coerce the `limit` query parameter.

    Numeric values are floored; anything absent, non-numeric or not
    positive falls back to `maximum`, and larger values are capped at it.
    """
    if raw is None:
        return maximum
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return maximum
    if value <= 0:
        return maximum
    return min(value, maximum)


def _parse_bound(name: str, raw: Optional[str]):
    try:
        return parse_date(raw)
    except ValueError:
        raise ValidationError(f"Invalid '{name}' date", detail=raw)


def _user_not_found(legacy: bool):
    if legacy:
        return PlainTextResponse(USER_NOT_FOUND)
    raise NotFoundError(USER_NOT_FOUND)


@router.get("", response_model=List[UserOut])
async def list_users(
    store: TrackerStore = Depends(get_tracker_store),
    legacy: bool = Depends(legacy_responses_enabled)
):
    """List all users as `{_id, username}`."""
    try:
        users = await store.list_users()
    except Exception as e:
        logger.error(f"Error fetching users: {e}")
        raise StoreError("Failed to fetch users") from e

    if not users and legacy:
        return PlainTextResponse(NO_USERS)

    return [UserOut(id=str(u.id), username=u.username) for u in users]


@router.post("", response_model=UserOut)
async def create_user(
    data: Annotated[UserCreate, Form()],
    store: TrackerStore = Depends(get_tracker_store)
):
    """Create a user. Usernames are not required to be unique."""
    try:
        user = await store.create_user(data.username)
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        raise StoreError("Failed to create user") from e

    return UserOut(id=str(user.id), username=user.username)


@router.post("/{user_id}/exercises", response_model=ExerciseOut)
async def log_exercise(
    user_id: str,
    data: Annotated[ExerciseCreate, Form()],
    store: TrackerStore = Depends(get_tracker_store),
    legacy: bool = Depends(legacy_responses_enabled)
):
    """
    Log an exercise for an existing user.

    The date defaults to the submission time when not supplied.
    """
    try:
        user = await store.get_user(user_id)
        if not user:
            return _user_not_found(legacy)

        exercise = await store.add_exercise(
            user,
            description=data.description,
            duration=data.duration,
            date=data.date,
        )
    except NotFoundError:
        raise
    except Exception as e:
        logger.error(f"Error saving exercise: {e}")
        raise StoreError("Failed to save exercise") from e

    return ExerciseOut(
        id=str(user.id),
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=format_date(exercise.date),
    )


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower bound (yyyy-mm-dd)"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper bound (yyyy-mm-dd)"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    store: TrackerStore = Depends(get_tracker_store),
    legacy: bool = Depends(legacy_responses_enabled)
):
    """
    Get a user's exercise log.

    Args:
        from: Only exercises on or after this date.
        to: Only exercises on or before this date.
        limit: Maximum entries returned (capped, default the cap).
    """
    start = _parse_bound("from", date_from)
    end = _parse_bound("to", date_to)
    max_entries = resolve_limit(limit, settings.LOG_LIMIT_MAX)

    try:
        user = await store.get_user(user_id)
        if not user:
            return _user_not_found(legacy)

        exercises = await store.find_exercises(
            str(user.id),
            date_from=start,
            date_to=end,
            limit=max_entries,
        )
    except NotFoundError:
        raise
    except Exception as e:
        logger.error(f"Error fetching logs: {e}")
        raise StoreError("Failed to fetch logs") from e

    log = [
        LogEntry(
            description=e.description,
            duration=e.duration,
            date=format_date(e.date),
        )
        for e in exercises
    ]

    return ExerciseLog(
        username=user.username,
        count=len(log),
        id=str(user.id),
        log=log,
    )
