"""Unit tests for the blog pydantic schemas."""

import pytest
from pydantic import ValidationError

from blog_list_api.app.schemas.blog import BlogCreate, BlogRead, BlogUpdate


class TestBlogCreate:
    """Validation of creation payloads."""

    def test_likes_defaults_to_zero(self):
        blog = BlogCreate(title="t", url="https://t.example")

        assert blog.likes == 0
        assert blog.author is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"url": "https://t.example"},
            {"title": "t"},
            {"title": "", "url": "https://t.example"},
            {"title": "t", "url": ""},
            {"title": "t", "url": "https://t.example", "likes": -1},
            {"title": "t", "url": "https://t.example", "likes": True},
            {"title": "t", "url": "https://t.example", "likes": "5"},
            {"title": "t", "url": "https://t.example", "likes": 3.0},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            BlogCreate(**payload)


class TestBlogUpdate:
    """Validation of update payloads."""

    def test_changes_only_contains_provided_fields(self):
        update = BlogUpdate(likes=12345)

        assert update.changes() == {"likes": 12345}

    def test_extra_fields_are_ignored(self):
        update = BlogUpdate(id="5f3d4a9b8c7e2f1a9b8c7e2f", likes=1)

        assert update.changes() == {"likes": 1}

    def test_author_may_be_cleared(self):
        assert BlogUpdate(author=None).changes() == {"author": None}

    @pytest.mark.parametrize("field", ["title", "url", "likes"])
    def test_required_fields_cannot_be_nulled(self, field):
        with pytest.raises(ValidationError):
            BlogUpdate(**{field: None})


class TestBlogRead:
    """Mapping stored documents to the public shape."""

    def test_from_document_renames_id_and_drops_internals(self):
        document = {
            "_id": "5f3d4a9b8c7e2f1a9b8c7e2f",
            "_version": 4,
            "title": "t",
            "url": "u",
            "likes": 2,
        }

        blog = BlogRead.from_document(document)

        assert blog.model_dump() == {
            "id": "5f3d4a9b8c7e2f1a9b8c7e2f",
            "title": "t",
            "url": "u",
            "author": None,
            "likes": 2,
        }
