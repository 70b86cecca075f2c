"""
FastAPI dependencies for the user endpoints.

The store lives on ``app.state`` (set up by ``main.create_app``), so
each application instance, and each test client, gets its own table
of users.  Tests can also swap the service via
``app.dependency_overrides[get_user_service]``.
"""

from fastapi import Depends, Request

from ..services.user_service import UserService
from ..services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    return UserService(store)
