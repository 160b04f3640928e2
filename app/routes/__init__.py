"""Exercise Tracker API - Routes Package."""

from app.routes import users

__all__ = [
    "users",
]
