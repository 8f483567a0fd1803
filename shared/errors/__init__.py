from .base import PlatformError, ValidationError, NotFoundError
from .api_errors import UpstreamError, ForumRequestError

__all__ = [
    "PlatformError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "ForumRequestError",
]
