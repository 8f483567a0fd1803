"""
Upstream API exceptions for the community forum backend.
"""

from typing import Optional
from .base import PlatformError


class UpstreamError(PlatformError):
    """Raised when a call to an external service fails."""
    pass


class ForumRequestError(UpstreamError):
    """
    Exception raised when a request to a Discourse forum fails.

    Covers transport failures, non-2xx responses and response bodies
    that do not carry the expected payload.
    """

    def __init__(self,
                 message: str,
                 url: Optional[str] = None,
                 status_code: Optional[int] = None,
                 api_response: Optional[str] = None):
        """
        Initialize the ForumRequestError with request details.

        Args:
            message: The error message
            url: The forum URL that was requested
            status_code: HTTP status returned by the forum, if any
            api_response: The raw response body or transport error text
        """
        super().__init__(
            message,
            url=url,
            status_code=status_code,
            api_response=api_response,
        )
        self.url = url
        self.status_code = status_code
        self.api_response = api_response

    def __str__(self):
        """Return a formatted string representation of the exception."""
        base_msg = super().__str__()
        if self.status_code:
            return f"[{self.status_code}] {base_msg}"
        return base_msg

    def to_dict(self):
        """
        Convert the exception to a dictionary for logging or API responses.

        Returns:
            dict: A dictionary containing detailed error information
        """
        data = super().to_dict()
        data.update({
            'url': self.url,
            'status_code': self.status_code,
            'api_response': self.api_response,
        })
        return data
