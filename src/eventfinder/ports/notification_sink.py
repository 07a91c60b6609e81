"""User-visible notification interface."""

from typing import Protocol


class NotificationSink(Protocol):
    """Interface for surfacing errors to the user."""

    def notify_error(self, message: str) -> None:
        """Show an error message. Fire-and-forget, must not raise."""
        ...
