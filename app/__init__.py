"""Exercise Tracker API - Application Package."""
