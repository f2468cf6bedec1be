"""
Document-store clients for blog posts.

``BlogStore`` defines the operations the service layer relies on;
``SQLiteBlogStore`` and ``InMemoryBlogStore`` implement them.  Use
``build_store`` to pick an implementation from the settings.
"""

from .base import BlogNotFoundError, BlogStore, is_valid_id, new_id
from .memory_store import InMemoryBlogStore
from .sqlite_store import SQLiteBlogStore

__all__ = [
    "BlogNotFoundError",
    "BlogStore",
    "InMemoryBlogStore",
    "SQLiteBlogStore",
    "build_store",
    "is_valid_id",
    "new_id",
]


def build_store(settings) -> BlogStore:
    """Instantiate the store selected by ``settings.blog_store``."""
    if settings.blog_store == "memory":
        return InMemoryBlogStore()
    if settings.blog_store == "sqlite":
        from blog_list_api.app.core.db import get_database_path

        return SQLiteBlogStore(get_database_path(settings.database_url))
    raise ValueError(f"Unknown blog store backend: {settings.blog_store!r}")
