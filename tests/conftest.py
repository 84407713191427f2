# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from itertools import count
from typing import Any

import pytest

# Configure before the application modules read their settings.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tech_news.db.session import Base
from tech_news.db.session import get_db as app_get_session
from tech_news.main import app as fastapi_app
from tech_news.models import Comment, Post, User
from tech_news.services import user_service

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "secret1"

_EMAIL_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def make_user_data(username: str) -> dict[str, Any]:
    """Return a registration payload with a unique email."""
    return {
        "username": username,
        "email": f"{username.lower()}{next(_EMAIL_COUNTER)}@example.com",
        "password": TEST_PASSWORD,
    }


@pytest.fixture()
def test_user_data() -> dict[str, Any]:
    """Return registration data for the primary test user."""
    return make_user_data("Tester")


@pytest.fixture()
def test_user(db_session: Session, test_user_data: dict[str, Any]) -> User:
    """Create and return a persisted test user (password hashed)."""
    return user_service.create_user(db_session, test_user_data)


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second persisted user."""
    return user_service.create_user(db_session, make_user_data("Other"))


@pytest.fixture()
def test_post(db_session: Session, test_user: User) -> Post:
    """Create a baseline post for tests."""
    post = Post(title="Taskmaster goes public!", post_url="https://taskmaster.com/press", user_id=test_user.id)
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post


@pytest.fixture()
def test_comment(db_session: Session, other_user: User, test_post: Post) -> Comment:
    """Create a comment by ``other_user`` on ``test_post``."""
    comment = Comment(comment_text="Great read", user_id=other_user.id, post_id=test_post.id)
    db_session.add(comment)
    db_session.commit()
    db_session.refresh(comment)
    return comment
