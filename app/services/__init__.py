"""Exercise Tracker API - Services Package."""
