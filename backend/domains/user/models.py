from sqlalchemy import Column, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from backend.domains.shared.db_base import Base, new_object_id
from backend.domains.shared.schemas import utcnow
from backend.domains.community.models import Community

# Composite primary key keeps membership a set: a user joins a community at most once.
user_communities = Table(
    "user_communities",
    Base.metadata,
    Column("user_id", String(32), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("community_id", String(32), ForeignKey("communities.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, index=True, default=new_object_id)
    uid = Column(String, unique=True, index=True, nullable=False)  # Externally-issued user id
    email = Column(String, nullable=True)
    name = Column(String, nullable=True)
    photo_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    memberships = relationship(Community, secondary=user_communities, lazy="selectin")

    @property
    def communities(self) -> list:
        """Ids of the communities this user belongs to."""
        return [community.id for community in self.memberships]

    def is_member_of(self, community_id: str) -> bool:
        return any(community.id == community_id for community in self.memberships)
