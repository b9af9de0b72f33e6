"""
Domain models - Immutable value objects exchanged through the ports.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserAccountInput:
    """Validated data handed to the account creator (no confirmation field)."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class UserAccount:
    """A created user account."""

    id: str
    name: str
    email: str
    password: str
