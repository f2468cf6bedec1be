"""Shared data and lookups for the blog API tests."""

import copy
from typing import List, Optional

from blog_list_api.app.schemas.blog import BlogRead
from blog_list_api.app.stores.base import BlogStore

_INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


def initial_blogs() -> List[dict]:
    return copy.deepcopy(_INITIAL_BLOGS)


def blogs_in_db(store: BlogStore) -> List[dict]:
    """Return the stored blogs in their public JSON shape."""
    return [BlogRead.from_document(doc).model_dump() for doc in store.find_all()]


def get_blog_by_id(store: BlogStore, blog_id: str) -> Optional[dict]:
    document = store.find_by_id(blog_id)
    if document is None:
        return None
    return BlogRead.from_document(document).model_dump()


def non_existing_id(store: BlogStore) -> str:
    """Return a well-formed id that belonged to a blog now deleted."""
    blog_id = store.insert_one({"title": "willremovethissoon", "url": "https://removed.example"})
    store.delete_by_id(blog_id)
    return blog_id
