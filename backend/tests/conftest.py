"""Shared test fixtures."""

import os

# Must be set before curriculos.database.base builds its engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from contextlib import asynccontextmanager, contextmanager
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from curriculos.curriculo.models import Curriculo
from curriculos.database.base import Base, get_db

# Models must be imported so Base.metadata.create_all() sees all tables.
_ALL_MODELS = [Curriculo]

TEST_SECRET = "test-secret"


@pytest.fixture
def db_engine():
    """In-memory SQLite database shared by the test session and the app."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(db_engine):
    TestSession = sessionmaker(bind=db_engine)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


def _mock_settings(**overrides) -> MagicMock:
    mock_settings = MagicMock()
    mock_settings.trusted_hosts_list = ["*"]
    mock_settings.cors_origins_list = ["*"]
    mock_settings.cors_allow_credentials = False
    mock_settings.api_prefix = ""
    mock_settings.csrf_enabled = True
    mock_settings.csrf_secret = TEST_SECRET
    mock_settings.csrf_token_max_age = None
    mock_settings.security_headers_enabled = True
    for key, value in overrides.items():
        setattr(mock_settings, key, value)
    return mock_settings


@pytest.fixture
def make_client(db_engine):
    """Factory for TestClients with patched lifespan and settings.

    ``db`` replaces the session handed to routes (e.g. a MagicMock that
    raises); by default every request gets a session on the test database.
    """
    from curriculos.main import create_app

    TestSession = sessionmaker(bind=db_engine)

    @asynccontextmanager
    async def _test_lifespan(app):
        yield

    @contextmanager
    def _make(db=None, **overrides):
        def _test_db():
            if db is not None:
                yield db
                return
            session = TestSession()
            try:
                yield session
            finally:
                session.close()

        with patch("curriculos.main.lifespan", _test_lifespan), patch(
            "curriculos.main.settings", _mock_settings(**overrides)
        ):
            app = create_app()
            app.dependency_overrides[get_db] = _test_db
            with TestClient(app, raise_server_exceptions=False) as client:
                yield client

    return _make


@pytest.fixture
def app_client(make_client):
    """Client with the anti-forgery guard enforced."""
    with make_client() as client:
        yield client


@pytest.fixture
def open_client(make_client):
    """Client with the anti-forgery guard disabled."""
    with make_client(csrf_enabled=False) as client:
        yield client


@pytest.fixture
def valid_payload():
    return {
        "nome": "Ana Souza",
        "telefone": "+55 11 99999-0000",
        "email": "ana@example.com",
        "enderecoWeb": "https://ana.dev",
        "experienciaProfissional": "<p>Desenvolvedora <strong>Python</strong></p>",
    }
