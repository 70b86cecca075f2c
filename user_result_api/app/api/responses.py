"""
Translate service results into HTTP responses.

Two mappings are provided:

* :func:`to_http_response` for operations that can only succeed or
  fail validation (create): 200 or 400.
* :func:`to_http_response_with_not_found` for operations that address
  an existing user (get, update, delete): 200, 404 or 400.

A success with a ``None`` value (delete) yields an empty 200 response.
Failures carry ``{"message": <error>}``.  A bare value passed instead of
a ``Result`` is treated as a success (see :meth:`Result.of`).
"""

from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.result import Result
from ..schemas.user import ErrorResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON response with the standard error body."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


def _success_response(value: Any) -> Response:
    if value is None:
        return Response(status_code=status.HTTP_200_OK)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(value))


def to_http_response(outcome: Any) -> Response:
    """Map ``outcome`` to 200 on success and 400 on any failure."""
    result = Result.of(outcome)
    if result.is_success:
        return _success_response(result.value)
    return error_response(status.HTTP_400_BAD_REQUEST, result.error)


def to_http_response_with_not_found(outcome: Any) -> Response:
    """Map ``outcome`` to 200, 404 for missing entities, or 400.

    A failure is treated as "not found" when it is tagged
    ``ErrorKind.NOT_FOUND`` or its message contains "not found"
    (case-insensitive); see :attr:`Result.is_not_found`.
    """
    result = Result.of(outcome)
    if result.is_success:
        return _success_response(result.value)
    if result.is_not_found:
        return error_response(status.HTTP_404_NOT_FOUND, result.error)
    return error_response(status.HTTP_400_BAD_REQUEST, result.error)
