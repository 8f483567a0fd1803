from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from backend.domains.shared.db_base import Base, new_object_id
from backend.domains.shared.schemas import utcnow


class DiscourseUserMapping(Base):
    """Links an application user to their account on one community's forum.

    Rows are provisioned by the forum registration flow; this service only reads them.
    """
    __tablename__ = "discourse_user_mappings"

    id = Column(String(32), primary_key=True, index=True, default=new_object_id)
    user_id = Column(String, nullable=False, index=True)  # External user id, same as User.uid
    community_id = Column(String(32), ForeignKey("communities.id", ondelete="CASCADE"), nullable=False)
    discourse_user_id = Column(Integer, nullable=True)
    discourse_username = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "community_id", name="uq_discourse_mapping_user_community"),
    )
