"""Exercise Tracker API - Middleware Package."""
