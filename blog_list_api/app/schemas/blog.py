"""
Pydantic models for blog posts.

``BlogCreate`` validates creation payloads, ``BlogUpdate`` validates
replacement payloads for ``PUT`` and ``BlogRead`` is the public
representation returned by every endpoint.  ``BlogRead`` exposes the
identifier as ``id`` and never carries store internals.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class BlogBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["React patterns"])
    url: str = Field(..., min_length=1, examples=["https://reactpatterns.com/"])
    author: Optional[str] = Field(None, examples=["Michael Chan"])


class BlogCreate(BlogBase):
    """Schema for creating a blog post.

    ``likes`` defaults to 0 and must be a JSON integer; booleans,
    floats and numeric strings are rejected.
    """

    likes: int = Field(0, ge=0, strict=True, examples=[7])


class BlogUpdate(BaseModel):
    """Schema for updating a blog post.

    Accepts the full record shape.  All fields are optional; only
    provided values are written, the rest of the stored record is
    kept.  An ``id`` sent in the body is ignored.
    """

    title: Optional[str] = Field(None, min_length=1)
    url: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = None
    likes: Optional[int] = Field(None, ge=0, strict=True)

    @field_validator("title", "url", "likes")
    @classmethod
    def reject_null(cls, v):
        # Only runs for values present in the payload.
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class BlogRead(BlogBase):
    """Schema for reading a blog post from the API."""

    id: str
    likes: int = 0

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "BlogRead":
        """Build the public view of a stored document."""
        return cls(
            id=document["_id"],
            title=document["title"],
            url=document["url"],
            author=document.get("author"),
            likes=document.get("likes", 0),
        )
