# main.py
"""
Exercise Tracker API - Main Application.

FastAPI app with MongoDB backend.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from database import Database
from settings import settings
from app.exception_handlers import register_exception_handlers
from app.middleware.db_middleware import LazyDatabaseMiddleware
from app.routes import users

BASE_DIR = Path(__file__).resolve().parent
VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Exercise Tracker API...")
    # A failed connection does not stop the server; requests retry it lazily
    try:
        await Database.connect_db(settings.DATABASE_URL, settings.DATABASE_NAME)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        logger.warning("Database will be initialized lazily on first request")

    yield

    await Database.close_db()
    logger.info("Exercise Tracker API shutdown complete")


app = FastAPI(
    title="Exercise Tracker API",
    version=VERSION,
    description="Users and their exercise logs",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LazyDatabaseMiddleware)

register_exception_handlers(app)

app.mount("/public", StaticFiles(directory=BASE_DIR / "public"), name="public")


@app.get("/health")
async def health_check():
    """Health check endpoint - fast response without database dependency."""
    return {
        "status": "ok",
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION
    }


@app.get("/health/detailed")
async def health_check_detailed():
    """Detailed health check with MongoDB connectivity test."""
    mongo_ok = await Database.ping()
    return {
        "status": "ok" if mongo_ok else "degraded",
        "database": "mongodb",
        "database_connected": mongo_ok,
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION
    }


@app.get("/", include_in_schema=False)
async def index():
    """Landing page."""
    return FileResponse(BASE_DIR / "views" / "index.html")


app.include_router(users.router, prefix="/api/users", tags=["Users"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
