"""
Base exception classes for the community forum backend.
"""


class PlatformError(Exception):
    """
    Base exception class for all platform errors.

    This serves as the parent class for all custom exceptions
    in the backend, providing a common interface for error
    handling and logging.
    """

    def __init__(self, message: str, **kwargs):
        """
        Initialize the PlatformError.

        Args:
            message: The error message
            **kwargs: Additional context information that subclasses can use
        """
        super().__init__(message)
        self.message = message
        self.context = kwargs

    def __str__(self):
        """Return a string representation of the error."""
        return self.message

    @property
    def detail(self) -> str:
        """Message suitable for an HTTP error body."""
        return self.message

    def to_dict(self):
        """
        Convert the exception to a dictionary for logging or API responses.

        Returns:
            dict: A dictionary containing error details
        """
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


class ValidationError(PlatformError):
    """Raised when input is missing or invalid."""
    pass


class NotFoundError(PlatformError):
    """Raised when a requested record does not exist."""
    pass
