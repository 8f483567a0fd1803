"""Community domain schemas."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any

from backend.domains.shared.schemas import UTCTimestampBase
from backend.domains.user.schemas import User


# --- Community Schemas ---
class CommunityCreate(BaseModel):
    # Optional at the schema level so blank or missing fields surface as 400, not 422
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    discourse_url: Optional[str] = None
    creator: Optional[str] = None


class Community(UTCTimestampBase):
    id: str
    name: str
    description: str
    category: str
    discourse_url: str
    creator: str
    members_count: int = 0
    status: str
    slug: str


class CommunityCreated(BaseModel):
    message: str = "Community created successfully"
    status: str = "success"
    community_id: str = Field(alias="communityId")

    model_config = ConfigDict(populate_by_name=True)


# --- Join Schemas ---
class JoinProfile(BaseModel):
    """Profile fields the client sends along with a join request."""
    email: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    photo_url: Optional[str] = Field(default=None, alias="photoURL")

    model_config = ConfigDict(populate_by_name=True)


class JoinRequest(BaseModel):
    community_id: Optional[str] = Field(default=None, alias="communityId")
    user_id: Optional[str] = Field(default=None, alias="userId")
    user: Optional[JoinProfile] = None

    model_config = ConfigDict(populate_by_name=True)


class ForumMapping(BaseModel):
    discourse_user_id: Optional[int] = Field(default=None, alias="discourseUserId")
    discourse_username: str = Field(alias="discourseUsername")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class JoinResponse(BaseModel):
    success: bool = True
    message: str = "Successfully joined community"
    discourse_user: Optional[Dict[str, Any]] = Field(default=None, alias="discourseUser")
    mapping: ForumMapping
    user: User
    degraded: bool = False

    model_config = ConfigDict(populate_by_name=True)
