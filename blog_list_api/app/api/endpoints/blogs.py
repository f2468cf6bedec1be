"""
Blog endpoints.

These routes expose list, retrieve, create, update and delete
operations on blog posts.  Request bodies are validated by the
pydantic schemas before any store access; invalid payloads are
answered with HTTP 400 by the application's validation handler.

Deleting a blog that does not exist is not an error: the response is
204 either way, so repeating a delete is harmless.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from blog_list_api.app.schemas.blog import BlogCreate, BlogRead, BlogUpdate
from blog_list_api.app.services.blog_service import BlogService
from blog_list_api.app.stores.base import BlogNotFoundError, is_valid_id

router = APIRouter()


def get_blog_service(request: Request) -> BlogService:
    """Return the service bound to the running application."""
    return request.app.state.blog_service


def valid_blog_id(blog_id: str) -> str:
    """Reject path identifiers that cannot name a stored blog."""
    if not is_valid_id(blog_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="malformatted id")
    return blog_id


@router.get("", response_model=List[BlogRead])
async def list_blogs(service: BlogService = Depends(get_blog_service)) -> List[BlogRead]:
    """Return every blog post."""
    return await service.list_blogs()


@router.get("/{blog_id}", response_model=BlogRead)
async def get_blog(
    blog_id: str = Depends(valid_blog_id),
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Retrieve a single blog by ID.  Returns HTTP 404 if it is absent."""
    blog = await service.get_blog(blog_id)
    if blog is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="blog not found")
    return blog


@router.post("", response_model=BlogRead, status_code=status.HTTP_201_CREATED)
async def create_blog(
    blog_in: BlogCreate,
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Create a new blog post.  ``likes`` defaults to 0."""
    return await service.create_blog(blog_in)


@router.put("/{blog_id}", response_model=BlogRead)
async def update_blog(
    blog_id: str,
    blog_in: BlogUpdate,
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Update an existing blog post.

    An id no stored blog can have is answered like any absent id,
    with HTTP 404.
    """
    if not is_valid_id(blog_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"blog {blog_id} not found")
    try:
        return await service.update_blog(blog_id, blog_in)
    except BlogNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
) -> None:
    """Delete a blog post; absent or unformed IDs also yield 204."""
    if is_valid_id(blog_id):
        await service.delete_blog(blog_id)
    return None
