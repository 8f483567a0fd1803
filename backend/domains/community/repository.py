from typing import Protocol, Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from backend.domains.community.models import Community
from backend.domains.shared.repository import SqlAlchemyRepository


class CommunityRepository(Protocol):
    """Protocol for Community repository operations."""

    def get(self, id: str) -> Optional[Community]:
        """Get a community by ID."""
        ...

    def list_active(self) -> List[Community]:
        """Get all active communities, newest first."""
        ...

    def add(self, entity: Community) -> Community:
        """Persist a new community."""
        ...

    def increment_members_count(self, id: str, amount: int = 1) -> None:
        """Atomically bump the member counter."""
        ...


class SqlAlchemyCommunityRepository(SqlAlchemyRepository[Community]):
    """SQLAlchemy implementation of CommunityRepository."""

    ACTIVE_STATUS = "active"

    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, Community)

    def list_active(self) -> List[Community]:
        """Get all active communities ordered by creation date, newest first."""
        return self.session.query(Community).filter(
            Community.status == self.ACTIVE_STATUS
        ).order_by(
            desc(Community.created_at)
        ).all()

    def increment_members_count(self, id: str, amount: int = 1) -> None:
        """
        Increment the member count with a single UPDATE statement.

        The loaded instance, if any, is expired so the next read sees the new value.
        """
        self.session.query(Community).filter(Community.id == id).update(
            {Community.members_count: Community.members_count + amount},
            synchronize_session=False
        )
        community = self.session.get(Community, id)
        if community is not None:
            self.session.expire(community, ["members_count"])
        self.session.flush()
