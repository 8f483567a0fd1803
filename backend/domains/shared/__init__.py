from .uow import SqlAlchemyUoW
from .repository import BaseRepository, SqlAlchemyRepository
from .db_base import Base, new_object_id

__all__ = [
    # Unit of Work
    "SqlAlchemyUoW",
    # Repository
    "BaseRepository",
    "SqlAlchemyRepository",
    # Declarative base
    "Base",
    "new_object_id",
]
