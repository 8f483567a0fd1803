"""Discourse domain schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Any


class ForumUserResponse(BaseModel):
    success: bool = True
    discourse_user: Dict[str, Any] = Field(alias="discourseUser")

    model_config = ConfigDict(populate_by_name=True)
