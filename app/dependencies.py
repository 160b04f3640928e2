"""
Exercise Tracker API - FastAPI Dependencies.

Dependency injection helpers for routes (MongoDB version).
"""

from typing import Optional

from app.services.tracker_store import TrackerStore

_tracker_store: Optional[TrackerStore] = None


def get_tracker_store() -> TrackerStore:
    """
    Get the shared tracker store.

    The store itself is stateless; the Motor connection pool behind it is
    bound to the document models by `Database.connect_db`.

    Returns:
        TrackerStore: Store used by the user and exercise routes.

    Example:
        @router.get("/users")
        async def list_users(store: TrackerStore = Depends(get_tracker_store)):
            return await store.list_users()
    """
    global _tracker_store
    if _tracker_store is None:
        _tracker_store = TrackerStore()
    return _tracker_store


def legacy_responses_enabled() -> bool:
    """Whether absence cases answer with legacy plain-text 200 responses."""
    from settings import settings
    return settings.LEGACY_RESPONSES
