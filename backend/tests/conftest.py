"""Shared pytest fixtures and configuration."""

import os
import random

# Keep the application engine off disk; tests bind their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-used-only-by-the-test-suite")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.auth import create_access_token
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Post, Page, Category, Tag
from app.services.slug import SlugService
from app.utils.slug import FallbackSlugGenerator


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded_fallback() -> FallbackSlugGenerator:
    """Fallback generator with a deterministic random source."""
    return FallbackSlugGenerator(rng=random.Random(1234))


@pytest.fixture
def slug_service(db, seeded_fallback) -> SlugService:
    return SlugService(db, fallback=seeded_fallback)


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    token = create_access_token({"sub": "admin-1", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> dict:
    token = create_access_token({"sub": "user-1", "role": "user"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_post(db):
    """Create a post, optionally with a slug already set."""
    def _make_post(title: str, slug: str = None, **kwargs) -> Post:
        post = Post(title=title, slug=slug, **kwargs)
        db.add(post)
        db.commit()
        db.refresh(post)
        return post
    return _make_post


@pytest.fixture
def make_page(db):
    def _make_page(title: str, slug: str = None) -> Page:
        page = Page(title=title, slug=slug)
        db.add(page)
        db.commit()
        db.refresh(page)
        return page
    return _make_page


@pytest.fixture
def make_category(db):
    def _make_category(name: str, slug: str = None) -> Category:
        category = Category(name=name, slug=slug)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category
    return _make_category


@pytest.fixture
def make_tag(db):
    def _make_tag(name: str, slug: str = None) -> Tag:
        tag = Tag(name=name, slug=slug)
        db.add(tag)
        db.commit()
        db.refresh(tag)
        return tag
    return _make_tag
