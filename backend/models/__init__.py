"""Every mapped model, imported so ``Base.metadata`` knows all tables."""

from backend.domains.shared.db_base import Base
from backend.domains.community.models import Community
from backend.domains.user.models import User, user_communities
from backend.domains.discourse.models import DiscourseUserMapping

__all__ = [
    "Base",
    "Community",
    "User",
    "user_communities",
    "DiscourseUserMapping",
]
