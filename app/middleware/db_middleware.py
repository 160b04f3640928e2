# app/middleware/db_middleware.py
"""
Lazy Database Connection Middleware.

Retries the MongoDB connection on API requests when startup failed.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from database import Database
from settings import settings

logger = logging.getLogger(__name__)


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure database connection before handling requests."""

    async def dispatch(self, request: Request, call_next):
        """
        Ensure database is connected before processing an API request.

        A failed attempt is logged and the request proceeds; its store
        calls then fail and the route answers with a 500.
        """
        if not request.url.path.startswith("/api/"):
            return await call_next(request)

        if not Database._initialized:
            try:
                logger.info("Lazy initializing MongoDB connection...")
                await Database.connect_db(
                    database_url=settings.DATABASE_URL,
                    database_name=settings.DATABASE_NAME
                )
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")

        return await call_next(request)
