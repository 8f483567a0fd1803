import datetime
from typing import Any, Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from backend.main import app
from backend.config.db import get_db
from backend.config.dependencies import get_discourse_client
from backend.models import Base, Community, DiscourseUserMapping
from shared.errors import ForumRequestError

# Use an in-memory SQLite database shared across connections
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeDiscourseClient:
    """Stands in for DiscourseClient; records calls and serves canned profiles."""

    def __init__(self):
        self.profiles: Dict[str, Dict[str, Any]] = {}
        self.fail_with: Optional[ForumRequestError] = None
        self.calls: List[Tuple[str, str]] = []

    def get_user_profile(self, base_url: str, username: str) -> Dict[str, Any]:
        self.calls.append((base_url, username))
        if self.fail_with is not None:
            raise self.fail_with
        if username not in self.profiles:
            raise ForumRequestError("Discourse returned HTTP 404", status_code=404)
        return self.profiles[username]


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    # Fresh tables for every test
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def forum_client() -> FakeDiscourseClient:
    return FakeDiscourseClient()


@pytest.fixture
def client(forum_client: FakeDiscourseClient) -> TestClient:
    """Fixture to provide a test client wired to the test database and fake forum."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_discourse_client] = lambda: forum_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_session() -> Session:
    """Fixture to provide a database session for each test."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture
def make_community(db_session: Session):
    """Factory inserting a community row directly."""
    def _make(
        name: str = "Rust Users",
        status: str = "active",
        created_at: Optional[datetime.datetime] = None,
        discourse_url: str = "https://forum.example.com",
    ) -> Community:
        community = Community(
            name=name,
            description=f"{name} description",
            category="programming",
            discourse_url=discourse_url,
            creator="creator-1",
            members_count=0,
            status=status,
            slug=name.lower().replace(" ", "-"),
            created_at=created_at or datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
        )
        db_session.add(community)
        db_session.commit()
        db_session.refresh(community)
        return community
    return _make


@pytest.fixture
def make_mapping(db_session: Session):
    """Factory inserting a forum account mapping, as the registration flow would."""
    def _make(
        user_id: str,
        community: Community,
        discourse_user_id: int = 42,
        discourse_username: str = "alice_forum",
    ) -> DiscourseUserMapping:
        mapping = DiscourseUserMapping(
            user_id=user_id,
            community_id=community.id,
            discourse_user_id=discourse_user_id,
            discourse_username=discourse_username,
        )
        db_session.add(mapping)
        db_session.commit()
        db_session.refresh(mapping)
        return mapping
    return _make
