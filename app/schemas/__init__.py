"""Exercise Tracker API - Pydantic Schemas Package."""
