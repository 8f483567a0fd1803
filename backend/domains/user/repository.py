from typing import Protocol, Optional
from sqlalchemy.orm import Session

from backend.domains.community.models import Community
from backend.domains.user.models import User
from backend.domains.shared.repository import SqlAlchemyRepository
from backend.domains.shared.schemas import utcnow


class UserRepository(Protocol):
    """Protocol for User repository operations."""

    def get(self, id: str) -> Optional[User]:
        """Get a user by ID."""
        ...

    def get_by_uid(self, uid: str) -> Optional[User]:
        """Get a user by the externally-issued user ID."""
        ...

    def upsert_membership(
        self,
        uid: str,
        community: Community,
        email: Optional[str] = None,
        name: Optional[str] = None,
        photo_url: Optional[str] = None
    ) -> User:
        """Create the user or add the community to an existing one."""
        ...


class SqlAlchemyUserRepository(SqlAlchemyRepository[User]):
    """SQLAlchemy implementation of UserRepository."""

    def __init__(self, session: Session):
        """Initialize with a SQLAlchemy session."""
        super().__init__(session, User)

    def get_by_uid(self, uid: str) -> Optional[User]:
        """Get a user by the externally-issued user ID."""
        return self.session.query(User).filter(
            User.uid == uid
        ).first()

    def upsert_membership(
        self,
        uid: str,
        community: Community,
        email: Optional[str] = None,
        name: Optional[str] = None,
        photo_url: Optional[str] = None
    ) -> User:
        """
        Record that a user belongs to a community.

        An existing user gets the community added to its membership set
        (no-op if already present) and its profile fields refreshed only
        where a non-empty value is supplied. Otherwise a new user is created
        with this community as its only membership.
        """
        user = self.get_by_uid(uid)

        if user:
            if not user.is_member_of(community.id):
                user.memberships.append(community)
            user.email = email or user.email
            user.name = name or user.name
            user.photo_url = photo_url or user.photo_url
            user.updated_at = utcnow()
        else:
            user = User(
                uid=uid,
                email=email,
                name=name,
                photo_url=photo_url,
                memberships=[community],
                created_at=utcnow()
            )
            self.session.add(user)

        self.session.flush()
        return user
