from shared.errors import ValidationError


class ForumMappingNotFoundException(ValidationError):
    """Raised when a user has no forum account mapped for a community."""
    def __init__(self, user_id: str, community_id: str, message: str = "Discourse user mapping not found"):
        super().__init__(message, user_id=user_id, community_id=community_id)
        self.user_id = user_id
        self.community_id = community_id
