"""HTTP event source adapter - REST client for the events API."""

import logging

import requests

from eventfinder.config import Config, DEFAULT_TIMEOUT, load_config

logger = logging.getLogger(__name__)


class EventFetchError(Exception):
    """Raised when the event list cannot be fetched or decoded."""

    pass


class HttpEventSource:
    """
    Events API adapter.

    Implements EventSource protocol. Handles the bearer token and the
    response envelope. No business logic - just I/O.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        if not base_url:
            raise ValueError("API base URL is required")
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_config(cls, config: Config | None = None) -> "HttpEventSource":
        config = config or load_config()
        return cls(
            config.api_base_url,
            token=config.api_token or None,
            timeout=config.request_timeout,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def fetch_events(self) -> list[dict]:
        """Fetch all events."""
        url = f"{self.base_url}/events"
        logger.debug(f"GET {url}")
        try:
            resp = self._session.get(url, headers=self._headers(), timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise EventFetchError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise EventFetchError(f"Invalid JSON from {url}: {e}") from e

        if isinstance(data, dict):
            data = data.get("events")
        if data is None:
            return []
        if not isinstance(data, list):
            raise EventFetchError(f"Unexpected payload from {url}: {type(data).__name__}")
        logger.debug(f"Fetched {len(data)} events")
        return data
