"""
User endpoints.

Each handler calls one ``UserService`` method and hands the resulting
``Result`` to the response mappers in ``api.responses``.  Handlers
never raise for expected failures; status codes are decided entirely
by the mapper.
"""

from fastapi import APIRouter, Depends, Response

from user_result_api.app.api.dependencies import get_user_service
from user_result_api.app.api.responses import to_http_response, to_http_response_with_not_found
from user_result_api.app.schemas.user import ErrorResponse, UserCreate, UserRead, UserUpdate
from user_result_api.app.services.user_service import UserService


router = APIRouter()

_LOOKUP_ERRORS = {404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}}
_BAD_REQUEST = {400: {"model": ErrorResponse}}


@router.get("/{user_id}", response_model=UserRead, responses=_LOOKUP_ERRORS)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    """Return a single user by id."""
    result = await service.get_by_id(user_id)
    return to_http_response_with_not_found(result)


@router.post("", response_model=UserRead, responses=_BAD_REQUEST)
@router.post("/", response_model=UserRead, responses=_BAD_REQUEST, include_in_schema=False)
async def create_user(body: UserCreate, service: UserService = Depends(get_user_service)) -> Response:
    """Register a new user.

    Fails with 400 when the name or email is blank, or when another
    user already has the same email (compared case-insensitively).
    """
    result = await service.create(body.name, body.email, body.age)
    return to_http_response(result)


@router.put("/{user_id}", response_model=UserRead, responses=_LOOKUP_ERRORS)
async def update_user(
    user_id: int,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Update the name and age of a user."""
    result = await service.update(user_id, body.name, body.age)
    return to_http_response_with_not_found(result)


@router.delete("/{user_id}", responses=_LOOKUP_ERRORS)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    """Delete a user.  Responds with an empty 200 body."""
    result = await service.delete(user_id)
    return to_http_response_with_not_found(result)
