"""
Service layer for blog posts.

``BlogService`` sits between the HTTP handlers and a ``BlogStore``.
Payloads arrive already validated as pydantic models; the service
turns them into store documents and maps stored documents back to
``BlogRead``.  Every operation touches at most one document.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from blog_list_api.app.schemas.blog import BlogCreate, BlogRead, BlogUpdate
from blog_list_api.app.stores.base import BlogStore

logger = logging.getLogger(__name__)


class BlogService:
    """Service class for managing blog posts."""

    def __init__(self, store: BlogStore) -> None:
        self.store = store

    async def list_blogs(self) -> List[BlogRead]:
        return [BlogRead.from_document(doc) for doc in self.store.find_all()]

    async def get_blog(self, blog_id: str) -> Optional[BlogRead]:
        """Retrieve a single blog by its ID, or ``None``."""
        document = self.store.find_by_id(blog_id)
        if document is None:
            return None
        return BlogRead.from_document(document)

    async def create_blog(self, data: BlogCreate) -> BlogRead:
        """Insert a new blog and return the created record."""
        document = data.model_dump()
        blog_id = self.store.insert_one(document)
        logger.info("Created blog %s '%s'", blog_id, data.title)
        return BlogRead(id=blog_id, **document)

    async def update_blog(self, blog_id: str, data: BlogUpdate) -> BlogRead:
        """Apply the fields provided in ``data`` to an existing blog.

        Raises ``BlogNotFoundError`` if the blog does not exist.
        """
        changes = data.changes()
        document = self.store.update_by_id(blog_id, changes)
        logger.info("Updated blog %s fields=%s", blog_id, sorted(changes))
        return BlogRead.from_document(document)

    async def delete_blog(self, blog_id: str) -> bool:
        """Delete a blog by ID.

        Returns ``True`` if a record was deleted, ``False`` if there
        was nothing to delete.
        """
        deleted = self.store.delete_by_id(blog_id)
        if deleted:
            logger.info("Deleted blog %s", blog_id)
        else:
            logger.info("Delete of absent blog %s ignored", blog_id)
        return deleted
