"""User domain schemas."""

from pydantic import ConfigDict, Field
from typing import Optional, List
import datetime

from backend.domains.shared.schemas import UTCTimestampBase


class User(UTCTimestampBase):
    id: str
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    communities: List[str] = []
    updated_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
