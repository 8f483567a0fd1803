from shared.errors import PlatformError, ValidationError, NotFoundError


class CommunityException(PlatformError):
    """Base exception for the community domain."""
    pass

class CommunityNotFoundException(CommunityException, NotFoundError):
    """Raised when a community id does not resolve."""
    def __init__(self, community_id: str):
        super().__init__("Community not found", community_id=community_id)

class MissingFieldsException(CommunityException, ValidationError):
    """Raised when a request lacks required fields."""
    def __init__(self, fields, message: str = "Missing required fields"):
        super().__init__(message, fields=list(fields))
        self.fields = list(fields)
