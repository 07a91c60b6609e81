"""Event source interface."""

from typing import Protocol


class EventSource(Protocol):
    """Interface for fetching the raw event list from any backend."""

    def fetch_events(self) -> list[dict]:
        """Fetch all events as raw records. May raise on failure."""
        ...
