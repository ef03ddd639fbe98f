"""Custom exception hierarchy for lexicard application."""


class LexicardError(Exception):
    """Base exception for all lexicard errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(LexicardError):
    """Validation error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)

