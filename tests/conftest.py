"""Shared fixtures.

Configuration is read at import time, so the environment is prepared
before anything from ``app`` is imported.  Every test gets its own
in-memory SQLite database.
"""

import os

os.environ.setdefault("SUPABASE_JWT_SECRET", "test-secret")
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite://"
os.environ["SNAPSHOT_TOKEN"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import app.db.base  # noqa: F401
from app.core.security import create_access_token
from app.db.session import build_engine, get_db
from app.main import app as fastapi_app

USER_ID = "0b6f1c2e-8a4d-4f6e-9c1a-3d2b5e7f9a01"
OTHER_USER_ID = "5d1e7a90-2c3b-4a8f-b6e4-9f0c1d2a3b4c"


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    return USER_ID


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_access_token(USER_ID)}"}


@pytest.fixture
def other_auth_headers():
    return {"Authorization": f"Bearer {create_access_token(OTHER_USER_ID)}"}
