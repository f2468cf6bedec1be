"""Abstract base class for blog document stores."""

import itertools
import os
import re
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

Document = Dict[str, Any]

_ID_PATTERN = re.compile(r"[0-9a-f]{24}")
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_counter_lock = threading.Lock()
_process_tag = os.urandom(5).hex()


class BlogNotFoundError(LookupError):
    """Raised when an update targets a document that does not exist."""

    def __init__(self, blog_id: str):
        super().__init__(f"blog {blog_id} not found")
        self.blog_id = blog_id


def new_id() -> str:
    """Return a fresh 24 character hex identifier.

    The layout is a 4 byte timestamp, a 5 byte per-process tag and a
    3 byte counter, so identifiers are never handed out twice.
    """
    with _counter_lock:
        count = next(_counter) & 0xFFFFFF
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{_process_tag}{count:06x}"


def is_valid_id(value: str) -> bool:
    return bool(_ID_PATTERN.fullmatch(value))


class BlogStore(ABC):
    """Abstract base class for blog document stores.

    Documents handed out by a store carry their identifier under
    ``_id`` and their revision counter under ``_version``; both are
    store-specific and must be mapped before leaving the API.
    """

    def init(self) -> None:
        """Prepare backing storage.  Safe to call more than once."""

    @abstractmethod
    def find_all(self) -> List[Document]:
        """Return every document in insertion order."""

    @abstractmethod
    def find_by_id(self, blog_id: str) -> Optional[Document]:
        """Return the document with ``blog_id`` or ``None``."""

    @abstractmethod
    def insert_one(self, document: Document) -> str:
        """Persist ``document`` and return its assigned identifier."""

    def insert_many(self, documents: Iterable[Document]) -> List[str]:
        return [self.insert_one(document) for document in documents]

    @abstractmethod
    def update_by_id(self, blog_id: str, changes: Document) -> Document:
        """Merge ``changes`` into a document and return the result.

        Raises:
            BlogNotFoundError: if no document has ``blog_id``
        """

    @abstractmethod
    def delete_by_id(self, blog_id: str) -> bool:
        """Remove a document.

        Returns ``True`` if a document was removed and ``False`` if
        none existed; absence is not an error.
        """

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every document and return how many were removed."""
