"""
SQLite-backed blog document store.

Each blog is one row of the ``blogs`` table with the document body
serialized as JSON.  Every public method opens its own connection
and closes it before returning, so the store can be shared between
requests without extra coordination.
"""

import json
import logging
import sqlite3
from typing import List, Optional

from blog_list_api.app.core.db import get_connection, init_db

from .base import BlogNotFoundError, BlogStore, Document, new_id

logger = logging.getLogger(__name__)


class SQLiteBlogStore(BlogStore):
    """Blog store persisting documents in an SQLite database file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def init(self) -> None:
        init_db(self.db_path)
        logger.info("Blog store ready at %s", self.db_path)

    def find_all(self) -> List[Document]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT id, document, version FROM blogs ORDER BY rowid ASC"
            ).fetchall()
            return [self._row_to_document(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, blog_id: str) -> Optional[Document]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT id, document, version FROM blogs WHERE id = ?",
                (blog_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_document(row)
        finally:
            conn.close()

    def insert_one(self, document: Document) -> str:
        body = json.dumps(self._strip_internal(document))
        conn = get_connection(self.db_path)
        try:
            while True:
                blog_id = new_id()
                try:
                    conn.execute(
                        "INSERT INTO blogs (id, document) VALUES (?, ?)",
                        (blog_id, body),
                    )
                except sqlite3.IntegrityError:
                    continue
                break
            conn.commit()
            logger.debug("Inserted blog %s", blog_id)
            return blog_id
        finally:
            conn.close()

    def update_by_id(self, blog_id: str, changes: Document) -> Document:
        conn = get_connection(self.db_path)
        try:
            # Reserve the write lock up front so the read and the write
            # below see the same revision.
            conn.execute("BEGIN IMMEDIATE")
            row = conn.execute(
                "SELECT document FROM blogs WHERE id = ?", (blog_id,)
            ).fetchone()
            if not row:
                conn.rollback()
                raise BlogNotFoundError(blog_id)
            merged = {**json.loads(row["document"]), **self._strip_internal(changes)}
            conn.execute(
                """
                UPDATE blogs
                SET document = ?, version = version + 1, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (json.dumps(merged), blog_id),
            )
            row = conn.execute(
                "SELECT id, document, version FROM blogs WHERE id = ?", (blog_id,)
            ).fetchone()
            conn.commit()
            return self._row_to_document(row)
        finally:
            conn.close()

    def delete_by_id(self, blog_id: str) -> bool:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM blogs WHERE id = ?", (blog_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    def delete_all(self) -> int:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("DELETE FROM blogs")
            affected = cursor.rowcount
            conn.commit()
            return affected
        finally:
            conn.close()

    @staticmethod
    def _strip_internal(document: Document) -> Document:
        return {k: v for k, v in document.items() if k not in ("_id", "_version")}

    @staticmethod
    def _row_to_document(row: sqlite3.Row) -> Document:
        """Convert a database row to a store document."""
        document = json.loads(row["document"])
        document["_id"] = row["id"]
        document["_version"] = row["version"]
        return document
