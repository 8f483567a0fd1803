"""Consolidated API router for all domain endpoints."""

from fastapi import APIRouter
from typing import List

# Import domain route modules
from backend.domains.community import routes as community
from backend.domains.discourse import routes as discourse

# Import schemas for response models
from backend.domains.community.schemas import Community, CommunityCreated, JoinResponse
from backend.domains.discourse.schemas import ForumUserResponse

# Paths are served from the root, matching the existing web client
router = APIRouter()

# Community endpoints
router.add_api_route(
    "/get-communities",
    community.list_communities,
    methods=["GET"],
    response_model=List[Community],
    tags=["communities"]
)
router.add_api_route(
    "/community/join",
    community.join_community,
    methods=["POST"],
    response_model=JoinResponse,
    response_model_exclude_unset=True,
    tags=["communities"]
)
router.add_api_route(
    "/community/{community_id}",
    community.get_community,
    methods=["GET"],
    response_model=Community,
    tags=["communities"]
)
router.add_api_route(
    "/create-community",
    community.create_community,
    methods=["POST"],
    response_model=CommunityCreated,
    status_code=201,
    tags=["communities"]
)

# Discourse endpoints
router.add_api_route(
    "/discourse/user/{community_id}",
    discourse.get_discourse_user,
    methods=["GET"],
    response_model=ForumUserResponse,
    tags=["discourse"]
)
