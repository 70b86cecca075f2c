"""
Pydantic models for user payloads.

Missing request fields default to empty values.  Presence checks live
in ``UserService``, so a missing name yields the same "Name is
required" message as a blank one.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Body of ``POST /api/users``."""

    name: str = Field("", examples=["John Doe"])
    email: str = Field("", examples=["john@example.com"])
    age: int = Field(0, examples=[30])


class UserUpdate(BaseModel):
    """Body of ``PUT /api/users/{id}``.  The email cannot be changed."""

    name: str = Field("", examples=["John Doe"])
    age: int = Field(0, examples=[31])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str
    age: int

    model_config = {
        "from_attributes": True,
    }


class ErrorResponse(BaseModel):
    """Body returned for every 4xx/5xx response."""

    message: str
