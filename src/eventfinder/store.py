"""Event store - holds the fetched list and the user's filter state.

The store is the single place where fetch failures are recovered: the list
is emptied, the loading flag cleared, and one notification surfaced. Derived
values (categories, filtered list, listing snapshot) are recomputed on every
read.
"""

import asyncio
import dataclasses
import logging
from datetime import date, tzinfo
from enum import Enum

from .core.events import Event, FilterState, extract_categories, filter_events, normalize_events
from .core.presentation import EventListing, adapt_events
from .ports import EventSource, NotificationSink

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch events"

_UNBOUND = object()


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class EventStore:
    """Coordinator between the event source, the filters and the renderer."""

    def __init__(
        self,
        source: EventSource,
        notifier: NotificationSink,
        *,
        tz: tzinfo | None = None,
    ):
        self.source = source
        self.notifier = notifier
        self.tz = tz
        self.events: list[Event] = []
        self.state = LoadState.IDLE
        self.filters = FilterState()
        self._request_seq = 0
        self._user = _UNBOUND
        self._settled = LoadState.IDLE

    @property
    def loading(self) -> bool:
        return self.state is LoadState.LOADING

    # ============== Fetching ==============

    def _begin_request(self) -> int:
        self._request_seq += 1
        self.state = LoadState.LOADING
        return self._request_seq

    def _is_stale(self, seq: int) -> bool:
        if seq != self._request_seq:
            logger.debug(f"Discarding response {seq}, latest request is {self._request_seq}")
            return True
        return False

    def _apply(self, events: list[Event]) -> None:
        self.events = events
        self.state = self._settled = LoadState.LOADED
        logger.info(f"Loaded {len(self.events)} events")

    def _fail(self, error: Exception) -> None:
        logger.warning(f"Event fetch failed: {error}")
        self.events = []
        self.state = self._settled = LoadState.ERROR
        self.notifier.notify_error(FETCH_ERROR_MESSAGE)

    def refresh(self) -> None:
        """Fetch the full list and replace the held one. Never raises."""
        seq = self._begin_request()
        try:
            events = normalize_events(self.source.fetch_events())
        except Exception as e:
            if not self._is_stale(seq):
                self._fail(e)
            return
        if not self._is_stale(seq):
            self._apply(events)

    async def refresh_async(self) -> None:
        """Like refresh(), awaiting the source in a worker thread.

        Only the latest issued request is applied; responses to earlier
        overlapping requests are dropped. If the awaiting task is cancelled
        while its request is the latest, the store goes back to its last
        settled state and the cancellation propagates.
        """
        seq = self._begin_request()
        try:
            events = normalize_events(await asyncio.to_thread(self.source.fetch_events))
        except asyncio.CancelledError:
            if seq == self._request_seq:
                logger.debug(f"Request {seq} cancelled")
                self._request_seq += 1
                self.state = self._settled
            raise
        except Exception as e:
            if not self._is_stale(seq):
                self._fail(e)
            return
        if not self._is_stale(seq):
            self._apply(events)

    def on_rsvp_changed(self) -> None:
        """Called after an RSVP succeeds elsewhere."""
        self.refresh()

    def bind_user(self, user: object | None) -> bool:
        """Track the signed-in user; refresh on first bind or on change.

        Returns True if a refresh was triggered.
        """
        if self._user is not _UNBOUND and self._user == user:
            return False
        self._user = user
        self.refresh()
        return True

    # ============== Filters ==============

    def set_selected_date(self, selected_date: date | None) -> None:
        self.filters = dataclasses.replace(self.filters, selected_date=selected_date)

    def set_search_query(self, query: str) -> None:
        self.filters = dataclasses.replace(self.filters, search_query=query or "")

    def set_preferences(self, preferences: list[str]) -> None:
        self.filters = dataclasses.replace(self.filters, preferences=tuple(preferences or ()))

    def set_category(self, category: str) -> None:
        self.filters = dataclasses.replace(self.filters, category=category or "")

    def clear_filters(self) -> None:
        """Reset every filter in a single state transition."""
        self.filters = FilterState()

    # ============== Derived values ==============

    def categories(self) -> list[str]:
        return extract_categories(self.events)

    def filtered_events(self) -> list[Event]:
        return filter_events(self.events, self.filters, self.tz)

    def view(self) -> EventListing:
        """Snapshot for the render layer."""
        return EventListing(
            loading=self.loading,
            cards=adapt_events(self.filtered_events(), self.on_rsvp_changed),
            categories=self.categories(),
            filters=self.filters,
        )
