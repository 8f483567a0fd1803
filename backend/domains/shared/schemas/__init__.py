"""Shared schemas across domains."""

from .base import UTCTimestampBase, UTC_ZONE, utcnow

__all__ = [
    # Base schemas
    'UTCTimestampBase',
    'UTC_ZONE',
    'utcnow',
]
