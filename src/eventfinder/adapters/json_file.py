"""File-based event source adapter."""

import json
from pathlib import Path

from .http_event_source import EventFetchError


class JsonFileEventSource:
    """
    Reads events from a JSON file.

    Implements EventSource protocol. The file holds either a list of event
    records or an object with an "events" list.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_events(self) -> list[dict]:
        """Read all events from the file."""
        try:
            data = json.loads(self.path.read_text())
        except OSError as e:
            raise EventFetchError(f"Cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise EventFetchError(f"Invalid JSON in {self.path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("events")
        if data is None:
            return []
        if not isinstance(data, list):
            raise EventFetchError(f"Expected a list of events in {self.path}")
        return data
