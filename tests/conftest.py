"""Fixtures shared by the blog API tests."""

import pytest
from fastapi.testclient import TestClient

from blog_list_api.app.main import create_app
from blog_list_api.app.stores import InMemoryBlogStore, SQLiteBlogStore

from .helper import initial_blogs


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """A store seeded with the initial blogs, one per backend."""
    if request.param == "memory":
        blog_store = InMemoryBlogStore()
    else:
        blog_store = SQLiteBlogStore(str(tmp_path / "blogs.db"))
    blog_store.init()
    blog_store.delete_all()
    blog_store.insert_many(initial_blogs())
    return blog_store


@pytest.fixture
def client(store):
    """A test client for an app wired to the ``store`` fixture."""
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
