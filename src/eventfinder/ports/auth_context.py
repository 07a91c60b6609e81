"""Authentication context interface."""

from typing import Protocol


class AuthContext(Protocol):
    """Interface exposing the current user identity."""

    def current_user(self) -> object | None:
        """Opaque, comparable identity of the signed-in user, or None."""
        ...
