"""
Business logic for users.

``UserService`` validates input, enforces the unique-email rule and
composes store calls.  Every method returns a :class:`Result`:

* validation problems produce a new failure with a domain message
  ("Name is required", "Email already exists", ...);
* failures coming back from a lookup are passed up unchanged, so the
  store's "User with ID 7 was not found" reaches the API layer intact.

Nothing here raises for an expected failure.
"""

import logging

from ..core.result import ErrorKind, Result
from ..models.user import User
from .user_store import UserStore

logger = logging.getLogger(__name__)

# Attempts at inserting a new user before giving up on id collisions.
MAX_ID_ATTEMPTS = 5


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


class UserService:
    """Use cases for the ``User`` entity.

    The store is injected so tests can run the service against a fake.
    """

    def __init__(self, store: UserStore) -> None:
        self._store = store

    async def get_by_id(self, user_id: int) -> Result[User]:
        """Return the user with ``user_id``.

        Non-positive ids are rejected without touching the store.
        """
        if user_id <= 0:
            return Result.failure("User ID must be greater than 0", ErrorKind.VALIDATION)
        return await self._store.get_by_id(user_id)

    async def create(self, name: str, email: str, age: int) -> Result[User]:
        """Register a new user and return it with its assigned id."""
        if _is_blank(name):
            return Result.failure("Name is required", ErrorKind.VALIDATION)
        if _is_blank(email):
            return Result.failure("Email is required", ErrorKind.VALIDATION)

        existing = await self._store.get_by_email(email)
        if existing.is_success:
            logger.debug("Rejected registration: email already exists for user %s", existing.value.id)
            return Result.failure("Email already exists", ErrorKind.VALIDATION)

        result: Result[User] = Result.failure("Could not allocate a user ID", ErrorKind.CONFLICT)
        for _ in range(MAX_ID_ATTEMPTS):
            user = User(id=self._store.next_id(), name=name, email=email, age=age)
            result = await self._store.add(user)
            # Only an id collision is worth retrying; anything else
            # (e.g. a concurrent duplicate email) is final.
            if result.is_success or result.kind is not ErrorKind.CONFLICT:
                break
            logger.warning("User ID %s was taken, allocating another", user.id)

        if result.is_success:
            logger.info("Created user %s", result.value.id)
        return result

    async def update(self, user_id: int, name: str, age: int) -> Result[User]:
        """Change the name and age of an existing user.  Email is never touched."""
        lookup = await self.get_by_id(user_id)
        if lookup.is_failure:
            return lookup

        if _is_blank(name):
            return Result.failure("Name is required", ErrorKind.VALIDATION)

        user = lookup.value
        user.name = name
        user.age = age
        result = await self._store.update(user)
        if result.is_success:
            logger.info("Updated user %s", user_id)
        return result

    async def delete(self, user_id: int) -> Result[None]:
        """Remove an existing user."""
        lookup = await self.get_by_id(user_id)
        if lookup.is_failure:
            return Result.failure(lookup.error, lookup.kind)

        result = await self._store.delete(user_id)
        if result.is_success:
            logger.info("Deleted user %s", user_id)
        return result
