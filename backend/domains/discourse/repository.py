from typing import Protocol, Optional
from sqlalchemy.orm import Session

from backend.domains.discourse.models import DiscourseUserMapping
from backend.domains.shared.repository import SqlAlchemyRepository


class DiscourseMappingRepository(Protocol):
    """Protocol for read access to forum account mappings."""

    def get_for_user(self, user_id: str, community_id: str) -> Optional[DiscourseUserMapping]:
        """Get the mapping for a (user, community) pair."""
        ...


class SqlAlchemyDiscourseMappingRepository(SqlAlchemyRepository[DiscourseUserMapping]):
    """SQLAlchemy implementation of DiscourseMappingRepository."""

    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, DiscourseUserMapping)

    def get_for_user(self, user_id: str, community_id: str) -> Optional[DiscourseUserMapping]:
        """Get the mapping for a (user, community) pair."""
        return self.session.query(DiscourseUserMapping).filter(
            DiscourseUserMapping.user_id == user_id,
            DiscourseUserMapping.community_id == community_id
        ).first()
