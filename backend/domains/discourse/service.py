"""Forum profile lookup for a user within one community."""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from backend.domains.community.exceptions import CommunityNotFoundException, MissingFieldsException
from backend.domains.community.repository import SqlAlchemyCommunityRepository
from backend.domains.discourse.client import DiscourseClient
from backend.domains.discourse.exceptions import ForumMappingNotFoundException
from backend.domains.discourse.repository import (
    DiscourseMappingRepository, SqlAlchemyDiscourseMappingRepository
)

logger = logging.getLogger(__name__)


class ForumProfileService:
    """Reads a user's forum profile; every failure is raised to the caller."""

    def __init__(self, session: Session, forum_client: DiscourseClient):
        self.session = session
        self.forum_client = forum_client
        self.community_repo = SqlAlchemyCommunityRepository(session)
        self.mapping_repo: DiscourseMappingRepository = SqlAlchemyDiscourseMappingRepository(session)

    def get_forum_user(self, community_id: str, user_id: Optional[str]) -> Dict[str, Any]:
        """
        Fetch the forum profile of a user registered with a community.

        Returns:
            The forum profile layered over the mapped ``id`` and ``username``;
            fields from the forum win on conflict.

        Raises:
            MissingFieldsException: user_id missing.
            ForumMappingNotFoundException: User not registered with this community.
            CommunityNotFoundException: The community does not exist.
            ForumRequestError: The forum request failed.
        """
        if not user_id:
            raise MissingFieldsException(["userId"], message="User ID is required")

        mapping = self.mapping_repo.get_for_user(user_id, community_id)
        if not mapping:
            raise ForumMappingNotFoundException(
                user_id, community_id, message="User not registered with this community"
            )

        community = self.community_repo.get(community_id)
        if not community:
            raise CommunityNotFoundException(community_id)

        profile = self.forum_client.get_user_profile(
            community.discourse_url, mapping.discourse_username
        )
        return {
            "id": mapping.discourse_user_id,
            "username": mapping.discourse_username,
            **profile,
        }
