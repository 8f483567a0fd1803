"""
Configuration management module.
"""
from .settings import Settings, get_settings, reload_settings
from .database import build_engine, engine, SessionLocal, Base
from .dependencies import (
    get_db,
    get_discourse_client,
    get_community_service,
    get_forum_profile_service,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    # Database
    "build_engine",
    "engine",
    "SessionLocal",
    "Base",
    # Dependencies
    "get_db",
    "get_discourse_client",
    "get_community_service",
    "get_forum_profile_service",
]
