"""Community domain API routes - thin routing layer."""

import logging
from typing import List

from fastapi import Depends, HTTPException, status

from backend.config.dependencies import get_community_service
from backend.domains.community.schemas import (
    Community as CommunitySchema,
    CommunityCreate,
    CommunityCreated,
    ForumMapping,
    JoinRequest,
    JoinResponse,
)
from backend.domains.community.service import CommunityService
from backend.domains.community.exceptions import CommunityNotFoundException
from backend.domains.user.schemas import User as UserSchema
from shared.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def list_communities(
    service: CommunityService = Depends(get_community_service)
) -> List[CommunitySchema]:
    """Return all active communities, newest first."""
    try:
        communities = service.list_communities()
        return [CommunitySchema.model_validate(c) for c in communities]
    except Exception:
        logger.exception("Error fetching communities")
        raise HTTPException(status_code=500, detail="Error fetching communities")


async def get_community(
    community_id: str,
    service: CommunityService = Depends(get_community_service)
) -> CommunitySchema:
    """Get a specific community."""
    try:
        community = service.get_community(community_id)
        return CommunitySchema.model_validate(community)
    except CommunityNotFoundException as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except Exception:
        logger.exception("Error fetching community %s", community_id)
        raise HTTPException(status_code=500, detail="Error fetching community")


async def create_community(
    data: CommunityCreate,
    service: CommunityService = Depends(get_community_service)
) -> CommunityCreated:
    """Create a new community."""
    try:
        community = service.create_community(data)
        return CommunityCreated(community_id=community.id)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
    except Exception:
        logger.exception("Error creating community")
        raise HTTPException(status_code=500, detail="Error creating community")


async def join_community(
    request: JoinRequest,
    service: CommunityService = Depends(get_community_service)
) -> JoinResponse:
    """Join a community and attach the user's forum profile when available."""
    try:
        result = service.join_community(request.community_id, request.user_id, request.user)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.detail)
    except Exception as e:
        logger.exception("Error in join process")
        raise HTTPException(
            status_code=500,
            detail={"message": str(e) or "Failed to join community", "details": repr(e)}
        )

    fields = dict(
        success=True,
        message="Successfully joined community",
        mapping=ForumMapping.model_validate(result.mapping),
        user=UserSchema.model_validate(result.user),
        degraded=result.degraded,
    )
    if not result.degraded:
        fields["discourse_user"] = result.forum_user
    return JoinResponse(**fields)
