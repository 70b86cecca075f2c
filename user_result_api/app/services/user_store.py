"""
In-memory storage for users.

``InMemoryUserStore`` keeps users in a dictionary keyed by id and
guards every read and write with a single lock, so concurrent requests
see atomic insert-if-absent, remove and read-after-write behaviour.
Every operation returns a :class:`Result`; a missing user is a
``NOT_FOUND`` failure rather than an exception.

The store is created once per application (see ``main.create_app``)
and handed to ``UserService``.  Anything implementing the
``UserStore`` protocol can take its place, which is how the service
tests plug in a fake.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import replace
from typing import Dict, Iterable, Optional, Protocol

from ..core.result import ErrorKind, Result
from ..models.user import User

logger = logging.getLogger(__name__)

SEED_USERS = (
    User(id=1, name="John Doe", email="john@example.com", age=30),
    User(id=2, name="Jane Smith", email="jane@example.com", age=25),
)


class UserStore(Protocol):
    """Operations ``UserService`` needs from a user store."""

    async def get_by_id(self, user_id: int) -> Result[User]: ...

    async def get_by_email(self, email: str) -> Result[User]: ...

    def next_id(self) -> int: ...

    async def add(self, user: User) -> Result[User]: ...

    async def update(self, user: User) -> Result[User]: ...

    async def delete(self, user_id: int) -> Result[None]: ...


class InMemoryUserStore:
    """Thread-safe dictionary-backed implementation of ``UserStore``.

    Parameters
    ----------
    users : Iterable[User], optional
        Users to preload.  Copies are stored, so the caller's objects
        are never shared with the store.
    latency : float
        Artificial delay in seconds applied before each async operation.
        ``0`` (the default) disables it.
    """

    def __init__(self, users: Optional[Iterable[User]] = None, latency: float = 0.0) -> None:
        self._users: Dict[int, User] = {}
        self._lock = threading.Lock()
        self._last_id = 0
        self._latency = latency
        for user in users or ():
            self._users[user.id] = replace(user)
            self._last_id = max(self._last_id, user.id)

    @classmethod
    def seeded(cls, latency: float = 0.0) -> "InMemoryUserStore":
        """Return a store preloaded with the two demo users."""
        return cls(SEED_USERS, latency=latency)

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    async def get_by_id(self, user_id: int) -> Result[User]:
        await self._simulate_latency()
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            return Result.failure(f"User with ID {user_id} was not found", ErrorKind.NOT_FOUND)
        return Result.success(user)

    async def get_by_email(self, email: str) -> Result[User]:
        await self._simulate_latency()
        with self._lock:
            user = self._find_by_email(email)
        if user is None:
            return Result.failure(f"User with email {email} was not found", ErrorKind.NOT_FOUND)
        return Result.success(user)

    def _find_by_email(self, email: str) -> Optional[User]:
        # Caller must hold the lock.
        wanted = email.casefold()
        for user in self._users.values():
            if user.email.casefold() == wanted:
                return user
        return None

    def next_id(self) -> int:
        """Reserve and return an id not used by any stored user."""
        with self._lock:
            candidate = self._last_id + 1
            while candidate in self._users:
                candidate += 1
            self._last_id = candidate
            return candidate

    async def add(self, user: User) -> Result[User]:
        """Insert ``user`` unless its id or email is already taken."""
        await self._simulate_latency()
        with self._lock:
            if user.id in self._users:
                return Result.failure(f"Failed to add user with ID {user.id}", ErrorKind.CONFLICT)
            if self._find_by_email(user.email) is not None:
                return Result.failure("Email already exists", ErrorKind.VALIDATION)
            self._users[user.id] = user
            self._last_id = max(self._last_id, user.id)
        logger.debug("Stored user %s", user.id)
        return Result.success(user)

    async def update(self, user: User) -> Result[User]:
        await self._simulate_latency()
        with self._lock:
            if user.id not in self._users:
                return Result.failure(f"User with ID {user.id} was not found", ErrorKind.NOT_FOUND)
            self._users[user.id] = user
        return Result.success(user)

    async def delete(self, user_id: int) -> Result[None]:
        await self._simulate_latency()
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is None:
            return Result.failure(f"User with ID {user_id} was not found", ErrorKind.NOT_FOUND)
        logger.debug("Removed user %s", user_id)
        return Result.success(None)
