import pytest

from backend.domains.community.models import Community
from backend.domains.shared.uow import SqlAlchemyUoW


def _community(name: str) -> Community:
    return Community(
        name=name,
        description="d",
        category="c",
        discourse_url="https://forum.example.com",
        creator="creator",
        slug=name.lower(),
    )


def test_commits_on_success(db_session):
    with SqlAlchemyUoW(db_session):
        db_session.add(_community("Kept"))

    db_session.expire_all()
    assert db_session.query(Community).filter(Community.name == "Kept").count() == 1


def test_rolls_back_on_error(db_session):
    with pytest.raises(RuntimeError):
        with SqlAlchemyUoW(db_session) as uow:
            db_session.add(_community("Dropped"))
            uow.flush()
            raise RuntimeError("boom")

    assert db_session.query(Community).filter(Community.name == "Dropped").count() == 0


def test_defaults_applied(db_session):
    with SqlAlchemyUoW(db_session):
        community = _community("Defaults")
        db_session.add(community)

    assert community.members_count == 0
    assert community.status == "active"
    assert len(community.id) == 32
