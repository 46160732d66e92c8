"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (posts, users) under a
unified prefix.  When new domains are introduced, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import posts, users

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(users.router, prefix="/users", tags=["users"])
