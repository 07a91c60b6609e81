"""Functional core - pure business logic with no I/O."""

from .events import (
    Event,
    FilterState,
    UNCATEGORIZED,
    normalize_event,
    normalize_events,
    extract_categories,
    filter_events,
)
from .presentation import (
    EventCard,
    EventListing,
    ListingPhase,
    adapt_event,
    adapt_events,
    format_card,
    seats_left,
)

__all__ = [
    # Events
    "Event",
    "FilterState",
    "UNCATEGORIZED",
    "normalize_event",
    "normalize_events",
    "extract_categories",
    "filter_events",
    # Presentation
    "EventCard",
    "EventListing",
    "ListingPhase",
    "adapt_event",
    "adapt_events",
    "format_card",
    "seats_left",
]
