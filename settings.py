# settings.py
"""
Exercise Tracker API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # MongoDB - REQUIRED from environment
    DATABASE_URL: str = Field(
        ...,
        validation_alias=AliasChoices("DATABASE_URL", "MONGO_URI"),
        description="MongoDB connection string (required)"
    )
    DATABASE_NAME: str = Field(default="exercise_tracker")

    # Server
    PORT: int = Field(default=3000, description="Listening port for `python main.py`")

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)

    # CORS
    CORS_ORIGINS: str = "*"

    # Plain-text 200 responses for "No users" / "Could not find user"
    LEGACY_RESPONSES: bool = True

    # Hard cap on log entries returned by /api/users/{id}/logs
    LOG_LIMIT_MAX: int = Field(default=500, ge=1)

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def is_mongodb(self) -> bool:
        """Check that the connection string points at MongoDB."""
        return self.DATABASE_URL.startswith("mongodb")

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def validate_required_settings(self) -> None:
        """Validate that required settings are configured."""
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL must be set")
        if not self.is_mongodb:
            raise ValueError("DATABASE_URL must be a mongodb:// or mongodb+srv:// URL")


settings = Settings()

# Validate in production
if settings.ENV == "production":
    settings.validate_required_settings()
