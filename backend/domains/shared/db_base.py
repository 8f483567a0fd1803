import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_object_id() -> str:
    """Generate a 32-character hex identifier for new records."""
    return uuid.uuid4().hex
