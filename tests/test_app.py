from http import HTTPStatus

import pytest
from pydantic import ValidationError

from blog_backend.config import Settings
from blog_backend.store import InMemoryStore


def test_root_reports_app_name(make_client):
    with make_client(app_name="Test Blog") as c:
        assert c.get("/").json() == {"message": "Test Blog is up"}


def test_example_scenario(make_client):
    with make_client() as c:
        assert c.post("/api/categories", json={"name": "Tech"}).json() == {"id": 1, "name": "Tech"}
        assert c.post(
            "/api/posts", json={"title": "Hello World", "content": "Body"}
        ).json() == {"id": 1, "slug": "hello-world"}

        draft = c.get("/api/posts/hello-world").json()
        assert (draft["content"], draft["views"]) == ("Body", 0)
        assert c.get("/api/posts").json() == {"posts": []}

        c.post("/api/posts/1/publish")
        assert c.get("/api/posts").json() == {
            "posts": [{"id": 1, "title": "Hello World", "slug": "hello-world"}]
        }


def test_each_app_owns_its_store(make_client):
    with make_client() as first, make_client() as second:
        first.post("/api/categories", json={"name": "Only here"})
        assert second.get("/api/categories").json() == {"categories": []}


def test_seed_demo_data_creates_admin(make_client):
    store = InMemoryStore()
    with make_client(store=store, seed_demo_data=True) as c:
        assert c.get("/api/users/1").json()["role"] == "admin"
        registered = c.post("/api/auth/register", json={"email": "a@b.c", "password": "pw"})
        assert registered.json()["userId"] == 2


def test_custom_prefix_and_mock_identity(make_client):
    with make_client(api_prefix="/v2", mock_user_id=7, mock_user_role="reader") as c:
        assert c.get("/v2/auth/me").json() == {"id": 7, "role": "reader"}
        assert c.get("/api/auth/me").status_code == HTTPStatus.NOT_FOUND

        c.post("/v2/posts/1/comments", json={"content": "hi"})
        assert c.get("/v2/posts/1/comments").json()["comments"][0]["user_id"] == 7


def test_settings_reject_unknown_role():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, registered_role="superuser")
