"""
Exercise Tracker API - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Optional


class ExerciseTrackerException(Exception):
    """
    Base exception class for the Exercise Tracker application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        """
        Initialize ExerciseTrackerException.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (default 500).
            detail: Additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class NotFoundError(ExerciseTrackerException):
    """
    Exception raised when a resource is not found.

    Used when:
    - User id does not match any stored user
    - User id is not a valid ObjectId
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class ValidationError(ExerciseTrackerException):
    """
    Exception raised for input validation failures.

    Used when:
    - Unparseable date in a query parameter
    - Missing required fields
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class StoreError(ExerciseTrackerException):
    """
    Exception raised when a database operation fails.

    The message is what the client sees; the underlying driver error is
    kept as the exception cause and logged, never returned.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )
