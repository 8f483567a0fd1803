"""Community domain service layer with business logic."""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from backend.domains.community.models import Community
from backend.domains.community.schemas import CommunityCreate, JoinProfile
from backend.domains.community.repository import (
    CommunityRepository, SqlAlchemyCommunityRepository
)
from backend.domains.community.exceptions import (
    CommunityNotFoundException,
    MissingFieldsException,
)
from backend.domains.discourse.client import DiscourseClient
from backend.domains.discourse.exceptions import ForumMappingNotFoundException
from backend.domains.discourse.models import DiscourseUserMapping
from backend.domains.discourse.repository import (
    DiscourseMappingRepository, SqlAlchemyDiscourseMappingRepository
)
from backend.domains.user.models import User
from backend.domains.user.repository import UserRepository, SqlAlchemyUserRepository
from backend.domains.shared.uow import SqlAlchemyUoW
from backend.domains.shared.schemas import utcnow
from shared.errors import ForumRequestError

logger = logging.getLogger(__name__)

REQUIRED_COMMUNITY_FIELDS = ("name", "description", "category", "discourse_url", "creator")

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lowercase the name and replace each run of whitespace with a hyphen."""
    return _WHITESPACE_RUN.sub("-", name.lower())


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


@dataclass
class JoinResult:
    """Outcome of a join.

    The join itself always succeeded when a result exists; ``forum_user`` is
    None when the forum profile could not be fetched, in which case
    ``forum_error`` holds the reason.
    """
    community: Community
    user: User
    mapping: DiscourseUserMapping
    forum_user: Optional[Dict[str, Any]] = None
    forum_error: Optional[ForumRequestError] = None

    @property
    def degraded(self) -> bool:
        return self.forum_user is None


class CommunityService:
    """Service layer for community domain operations."""

    def __init__(self, session: Session, forum_client: DiscourseClient):
        """Initialize with database session and forum client."""
        self.session = session
        self.forum_client = forum_client
        self.community_repo: CommunityRepository = SqlAlchemyCommunityRepository(session)
        self.user_repo: UserRepository = SqlAlchemyUserRepository(session)
        self.mapping_repo: DiscourseMappingRepository = SqlAlchemyDiscourseMappingRepository(session)

    # Community operations

    def list_communities(self) -> List[Community]:
        """Return active communities, newest first."""
        return self.community_repo.list_active()

    def get_community(self, community_id: str) -> Community:
        """Get a community or raise CommunityNotFoundException."""
        community = self.community_repo.get(community_id)
        if not community:
            raise CommunityNotFoundException(community_id)
        return community

    def create_community(self, data: CommunityCreate) -> Community:
        """
        Create a new active community.

        Raises:
            MissingFieldsException: If any required field is missing or blank.
                Nothing is written in that case.
        """
        missing = [f for f in REQUIRED_COMMUNITY_FIELDS if _is_blank(getattr(data, f))]
        if missing:
            raise MissingFieldsException(missing)

        with SqlAlchemyUoW(self.session) as uow:
            community = Community(
                name=data.name,
                description=data.description,
                category=data.category,
                discourse_url=data.discourse_url,
                creator=data.creator,
                members_count=0,
                status="active",
                slug=slugify(data.name),
                created_at=utcnow()
            )
            self.community_repo.add(community)
            uow.commit()

        logger.info("Created community %s (%s)", community.id, community.slug)
        return community

    # Join workflow

    def join_community(
        self,
        community_id: Optional[str],
        user_id: Optional[str],
        profile: Optional[JoinProfile] = None
    ) -> JoinResult:
        """
        Add a user to a community and attach their forum profile.

        The user upsert and the member counter increment commit together.
        The forum profile is fetched afterwards; if that fails the join still
        succeeds and the result is marked degraded.

        Raises:
            MissingFieldsException: communityId or userId missing.
            CommunityNotFoundException: The community does not exist.
            ForumMappingNotFoundException: The user has no forum account for
                this community. No local state is changed.
        """
        missing = [
            field for field, value in (("communityId", community_id), ("userId", user_id))
            if _is_blank(value)
        ]
        if missing:
            raise MissingFieldsException(missing, message="communityId and userId are required")

        profile = profile or JoinProfile()
        logger.info("Join request received: community=%s user=%s", community_id, user_id)

        community = self.get_community(community_id)

        mapping = self.mapping_repo.get_for_user(user_id, community.id)
        if not mapping:
            logger.info("No discourse mapping for user=%s community=%s", user_id, community_id)
            raise ForumMappingNotFoundException(user_id, community.id)

        with SqlAlchemyUoW(self.session) as uow:
            user = self.user_repo.upsert_membership(
                uid=user_id,
                community=community,
                email=profile.email,
                name=profile.display_name,
                photo_url=profile.photo_url
            )
            # Counted on every completed join, even when the user was already a member.
            self.community_repo.increment_members_count(community.id)
            uow.commit()

        result = JoinResult(community=community, user=user, mapping=mapping)
        try:
            result.forum_user = self.forum_client.get_user_profile(
                community.discourse_url, mapping.discourse_username
            )
        except ForumRequestError as e:
            logger.warning(
                "Joined community %s but could not fetch discourse user %s: %s",
                community.id, mapping.discourse_username, e
            )
            result.forum_error = e

        return result
