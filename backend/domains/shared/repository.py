from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, Any
from sqlalchemy.orm import Session


T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository defining the interface for data access."""

    @abstractmethod
    def get(self, id: Any) -> Optional[T]:
        """Get an entity by its ID."""
        pass

    @abstractmethod
    def add(self, entity: T) -> T:
        """Add a new entity."""
        pass


class SqlAlchemyRepository(BaseRepository[T]):
    """SQLAlchemy implementation of the base repository."""

    def __init__(self, session: Session, model_class: type):
        """
        Initialize the repository with a session and model class.

        Args:
            session: SQLAlchemy session
            model_class: SQLAlchemy model class to operate on
        """
        self.session = session
        self.model_class = model_class

    def get(self, id: Any) -> Optional[T]:
        """Get an entity by its ID."""
        return self.session.query(self.model_class).filter(
            self.model_class.id == id
        ).first()

    def add(self, entity: T) -> T:
        """Add a new entity."""
        self.session.add(entity)
        self.session.flush()  # Flush to get the ID without committing
        return entity

