from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .settings import Settings, get_settings


def build_engine(settings: Settings) -> Engine:
    """Create the engine for the community store described by ``settings``."""
    url = settings.database_url
    if url.startswith("sqlite"):
        # SQLite connections are shared across request threads
        return create_engine(url, connect_args={"check_same_thread": False}, echo=settings.debug)

    return create_engine(
        url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=settings.pool_pre_ping,
        pool_recycle=settings.pool_recycle,
        echo=settings.debug
    )


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Community, user and mapping models all share this Base
from ..domains.shared.db_base import Base
