"""
Pytest fixtures.

Tests run against an in-memory SQLite database instead of Postgres.
"""

import os

# Set environment variables for tests (before the settings are cached)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SITE_CHAVE_API", "test-api-key")
os.environ.setdefault("DISCORD_CLIENT_ID", "test-client-id")
os.environ.setdefault("DISCORD_CLIENT_SECRET", "test-client-secret")
os.environ.setdefault("LOG_FORMAT", "text")

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import indicacoes.models  # noqa: F401
from indicacoes.application.services.session_service import SessionService
from indicacoes.core.config import get_settings
from indicacoes.core.database import Base, get_db
from indicacoes.core.security import generate_id
from indicacoes.domain.enums import Cargo, LeadStatus
from indicacoes.models import Lead, User


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Database session bound to the test database."""
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def make_user(db_session):
    """Factory for committed users."""

    def _make_user(**overrides) -> User:
        values = {
            "id": generate_id(15),
            "name": "Maria",
            "email": f"{generate_id(6)}@example.com",
            "job": Cargo.FINANCEIRO,
            "bonus_indicacao": 0,
            "status": True,
        }
        values.update(overrides)
        user = User(**values)
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def make_lead(db_session):
    """Factory for committed leads."""

    def _make_lead(**overrides) -> Lead:
        values = {
            "id": str(uuid4()),
            "full_name": "João da Silva",
            "cpf_cnpj": generate_id(11),
            "status": LeadStatus.FINALIZADO,
        }
        values.update(overrides)
        lead = Lead(**values)
        db_session.add(lead)
        db_session.commit()
        return lead

    return _make_lead


@pytest.fixture
def app(db_session):
    """FastAPI app wired to the test session."""
    from indicacoes.main import app as fastapi_app

    def _get_test_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = _get_test_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Anonymous HTTP client."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def financeiro_user(make_user):
    return make_user(name="Fernanda", job=Cargo.FINANCEIRO)


@pytest.fixture
def auth_client(client, db_session, financeiro_user):
    """HTTP client logged in as a financial user."""
    new_session = SessionService(db_session).create_session(financeiro_user.id)
    client.cookies.set(get_settings().SESSION_COOKIE_NAME, new_session.token)
    return client
