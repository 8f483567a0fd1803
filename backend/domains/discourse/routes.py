"""Discourse domain API routes."""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Query

from backend.config.dependencies import get_forum_profile_service
from backend.domains.discourse.exceptions import ForumMappingNotFoundException
from backend.domains.discourse.schemas import ForumUserResponse
from backend.domains.discourse.service import ForumProfileService
from shared.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def get_discourse_user(
    community_id: str,
    user_id: Optional[str] = Query(None, alias="userId"),
    service: ForumProfileService = Depends(get_forum_profile_service)
) -> ForumUserResponse:
    """Fetch the forum profile of a user registered with a community."""
    try:
        discourse_user = service.get_forum_user(community_id, user_id)
        return ForumUserResponse(discourse_user=discourse_user)
    # A missing mapping means the user is unknown to this forum, not a bad request.
    except (ForumMappingNotFoundException, NotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.detail)
    except Exception:
        logger.exception("Error fetching discourse user")
        raise HTTPException(status_code=500, detail="Error fetching discourse user")
