"""Common dependencies for FastAPI routes."""

from fastapi import Depends
from sqlalchemy.orm import Session

from .db import get_db
from .settings import get_settings
from backend.domains.discourse.client import DiscourseClient
from backend.domains.discourse.service import ForumProfileService
from backend.domains.community.service import CommunityService


def get_discourse_client() -> DiscourseClient:
    """Build a forum client from the configured service credentials."""
    settings = get_settings()
    return DiscourseClient(
        api_key=settings.discourse_api_key,
        api_username=settings.discourse_api_username,
        timeout=settings.discourse_timeout,
    )


def get_community_service(
    db: Session = Depends(get_db),
    forum_client: DiscourseClient = Depends(get_discourse_client),
) -> CommunityService:
    """Dependency to get community service."""
    return CommunityService(db, forum_client)


def get_forum_profile_service(
    db: Session = Depends(get_db),
    forum_client: DiscourseClient = Depends(get_discourse_client),
) -> ForumProfileService:
    """Dependency to get forum profile lookup service."""
    return ForumProfileService(db, forum_client)
