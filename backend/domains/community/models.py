from sqlalchemy import Column, Integer, String, DateTime, Text, Index
from backend.domains.shared.db_base import Base, new_object_id
from backend.domains.shared.schemas import utcnow


class Community(Base):
    __tablename__ = "communities"

    id = Column(String(32), primary_key=True, index=True, default=new_object_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    discourse_url = Column(String, nullable=False)  # Base URL of the community's Discourse forum
    creator = Column(String, nullable=False)
    members_count = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="active")  # "active" or anything else
    slug = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_communities_status_created_at", "status", "created_at"),
    )
