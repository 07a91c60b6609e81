"""Fixed-identity auth context for non-interactive use."""


class StaticAuthContext:
    """Implements AuthContext protocol with a fixed user."""

    def __init__(self, user: object | None = None):
        self.user = user

    def current_user(self) -> object | None:
        return self.user
