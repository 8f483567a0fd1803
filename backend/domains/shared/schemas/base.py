"""Base schemas shared across domains."""

from pydantic import BaseModel, ConfigDict, field_serializer
import datetime

UTC_ZONE = datetime.timezone.utc


# --- Base Schemas for Reusability ---
class UTCTimestampBase(BaseModel):
    """Read schema for records carrying a creation timestamp.

    SQLite hands back naive datetimes; they are stored as UTC, so the
    serializer attaches the zone before the value leaves the API.
    """
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer('created_at')
    def serialize_created_at(self, dt: datetime.datetime) -> datetime.datetime:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC_ZONE)
        return dt.astimezone(UTC_ZONE)


def utcnow() -> datetime.datetime:
    """Timezone-aware current time in UTC."""
    return datetime.datetime.now(UTC_ZONE)
