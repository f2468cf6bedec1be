"""Process-local blog store keeping documents in a dict."""

import copy
import logging
import threading
from typing import Dict, List, Optional

from .base import BlogNotFoundError, BlogStore, Document, new_id

logger = logging.getLogger(__name__)


class InMemoryBlogStore(BlogStore):
    """Blog store backed by an insertion-ordered dict.

    Each operation holds a lock so single-document operations are
    atomic.  Returned documents are copies; mutating them does not
    touch the store.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}
        self._lock = threading.Lock()

    def find_all(self) -> List[Document]:
        with self._lock:
            return [copy.deepcopy(doc) for doc in self._documents.values()]

    def find_by_id(self, blog_id: str) -> Optional[Document]:
        with self._lock:
            document = self._documents.get(blog_id)
            return copy.deepcopy(document) if document is not None else None

    def insert_one(self, document: Document) -> str:
        with self._lock:
            blog_id = new_id()
            while blog_id in self._documents:
                blog_id = new_id()
            stored = copy.deepcopy(document)
            stored["_id"] = blog_id
            stored["_version"] = 0
            self._documents[blog_id] = stored
        logger.debug("Inserted blog %s", blog_id)
        return blog_id

    def update_by_id(self, blog_id: str, changes: Document) -> Document:
        with self._lock:
            current = self._documents.get(blog_id)
            if current is None:
                raise BlogNotFoundError(blog_id)
            updated = {**current, **copy.deepcopy(changes)}
            updated["_id"] = blog_id
            updated["_version"] = current["_version"] + 1
            self._documents[blog_id] = updated
            return copy.deepcopy(updated)

    def delete_by_id(self, blog_id: str) -> bool:
        with self._lock:
            return self._documents.pop(blog_id, None) is not None

    def delete_all(self) -> int:
        with self._lock:
            count = len(self._documents)
            self._documents.clear()
            return count
