import os

import pytest
from fastapi.testclient import TestClient

from blog_backend import models
from blog_backend.config import Settings
from blog_backend.main import create_app
from blog_backend.store import InMemoryStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BLOG_* variables from the shell out of the settings under test."""
    for name in list(os.environ):
        if name.upper().startswith("BLOG_"):
            monkeypatch.delenv(name)


@pytest.fixture()
def store():
    """A brand new store for every test, so ids always start at 1."""
    return InMemoryStore()


@pytest.fixture()
def client(store):
    """TestClient for a freshly built application that owns ``store``.

    Settings are built from defaults only, ignoring any .env file.
    """
    app = create_app(settings=Settings(_env_file=None), store=store)

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_client():
    """Build a client around a separately configured application."""

    def _make(store=None, **overrides):
        settings = Settings(_env_file=None, **overrides)
        return TestClient(create_app(settings=settings, store=store))

    return _make


@pytest.fixture()
def post_factory(store):
    """Create posts directly in the store without going through HTTP."""

    def _create_post(title: str, content: str = "Body", **fields) -> models.Post:
        post = models.Post(
            title=title,
            slug=title.lower().replace(" ", "-"),
            content=content,
            **fields,
        )
        store.append(post)
        return post

    return _create_post


@pytest.fixture()
def user_factory(store):
    def _create_user(username: str = "alice", role: str = "reader", bio: str = "") -> models.User:
        user = models.User(
            username=username,
            email=f"{username}@example.com",
            password="secret",
            role=role,
            bio=bio,
        )
        store.append(user)
        return user

    return _create_user
