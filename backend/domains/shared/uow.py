from sqlalchemy.orm import Session


class SqlAlchemyUoW:
    """SQLAlchemy implementation of the Unit of Work pattern.

    Wraps a request-scoped session: everything done inside the ``with``
    block commits together, or is rolled back together if the block raises.
    The session itself stays open; its lifetime belongs to ``get_db``.
    """

    def __init__(self, session: Session):
        """
        Initialize the Unit of Work with an open session.

        Args:
            session: The SQLAlchemy session the transaction runs on
        """
        self.session = session
        self._committed = False

    def __enter__(self):
        """Enter the transactional block."""
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the block, committing or rolling back as needed."""
        if exc_type:
            self.rollback()
            return False
        if not self._committed:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        return False

    def commit(self):
        """Commit the current transaction."""
        self.session.commit()
        self._committed = True

    def rollback(self):
        """Rollback the current transaction."""
        self.session.rollback()

    def flush(self):
        """Flush pending changes to the database without committing."""
        self.session.flush()

