"""User entity."""

from dataclasses import dataclass


@dataclass
class User:
    """A registered user.

    ``id`` and ``email`` are fixed once the user is created; ``name``
    and ``age`` may be changed by an update.
    """

    id: int
    name: str
    email: str
    age: int = 0
