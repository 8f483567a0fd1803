from sqlalchemy import text

from backend.config.database import build_engine
from backend.config.settings import Settings


def test_sqlite_engine_connects():
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    assert engine.url.get_backend_name() == "sqlite"
    with engine.connect() as conn:
        assert conn.execute(text("SELECT 1")).scalar() == 1


def test_debug_enables_statement_echo():
    assert build_engine(Settings(database_url="sqlite:///:memory:", debug=True)).echo is True
    assert build_engine(Settings(database_url="sqlite:///:memory:")).echo is False


def test_pool_recycle_default():
    assert Settings().pool_recycle == 3600
