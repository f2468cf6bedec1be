"""
Top‑level API router.

Aggregates resource routers under the ``/api`` prefix applied by
``create_app``.
"""

from fastapi import APIRouter

from .endpoints import blogs

router = APIRouter()

router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
