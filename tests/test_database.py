"""
Tests for the engine and session plumbing.
"""

from sqlalchemy import text
from sqlalchemy.orm import Session

from indicacoes.core.database import get_db, get_engine, get_sessionmaker


class TestDatabase:
    def test_engine_is_cached(self):
        assert get_engine() is get_engine()
        assert get_sessionmaker() is get_sessionmaker()

    def test_sqlite_url_allows_cross_thread_use(self):
        """Test the SQLite engine is usable from the request threadpool."""
        engine = get_engine()
        assert engine.dialect.name == "sqlite"
        with engine.connect() as connection:
            assert connection.execute(text("SELECT 1")).scalar() == 1

    def test_get_db_yields_and_closes_session(self):
        generator = get_db()
        db = next(generator)
        assert isinstance(db, Session)
        assert db.execute(text("SELECT 1")).scalar() == 1

        generator.close()
        assert not db.in_transaction()
