"""
Top‑level API router.

Aggregates domain routers under a common prefix.  The application
mounts this router at ``/api`` (see ``main.create_app``).
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
