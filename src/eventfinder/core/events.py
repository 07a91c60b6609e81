"""Pure event domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo

UNCATEGORIZED = "Uncategorized"


@dataclass
class Event:
    """A fully-defaulted event record."""

    id: str
    name: str = ""
    description: str = ""
    category: str = ""
    start: datetime | None = None
    end: datetime | None = None
    capacity: int = 0
    attendees: list | None = None
    organizer_name: str | None = None
    image_url: str = ""
    location: str = ""

    @property
    def category_label(self) -> str:
        """Category for display and grouping; empty becomes Uncategorized."""
        return self.category or UNCATEGORIZED

    def start_date(self, tz: tzinfo | None = None) -> date | None:
        """Calendar day the event starts on, in `tz` (or local time)."""
        if self.start is None:
            return None
        if self.start.tzinfo is None:
            return self.start.date()
        return self.start.astimezone(tz).date()


@dataclass(frozen=True)
class FilterState:
    """User-controlled filter parameters."""

    selected_date: date | None = None
    preferences: tuple[str, ...] = field(default_factory=tuple)
    search_query: str = ""
    category: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.selected_date or self.preferences or self.search_query)


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp. Returns None if missing or invalid."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    # fromisoformat only learned about "Z" in 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _capacity(value) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return max(int(value), 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def _organizer_name(value) -> str | None:
    if isinstance(value, dict):
        return value.get("username") or value.get("name") or None
    if isinstance(value, str) and value:
        return value
    return None


def normalize_event(raw: dict | None) -> Event | None:
    """
    Convert a raw API record into an Event.

    Pure function - no I/O. Returns None for null or non-mapping entries so
    callers can drop them; every missing field is defaulted here so that
    nothing downstream has to handle None.
    """
    if not isinstance(raw, dict):
        return None

    attendees = raw.get("attendees")
    if attendees is not None and not isinstance(attendees, list):
        attendees = None

    return Event(
        id=_text(raw.get("id") or raw.get("_id")),
        name=_text(raw.get("name")),
        description=_text(raw.get("description")),
        category=_text(raw.get("category")),
        start=parse_timestamp(raw.get("startDateTime")),
        end=parse_timestamp(raw.get("endDateTime")),
        capacity=_capacity(raw.get("capacity")),
        attendees=attendees,
        organizer_name=_organizer_name(raw.get("organizer")),
        image_url=_text(raw.get("imageUrl")),
        location=_text(raw.get("location")),
    )


def normalize_events(payload) -> list[Event]:
    """Normalize a fetched payload, dropping null entries and keeping order."""
    if not isinstance(payload, list):
        return []
    events = []
    for raw in payload:
        event = normalize_event(raw)
        if event is not None:
            events.append(event)
    return events


def extract_categories(events: list[Event | None]) -> list[str]:
    """
    Unique category labels in first-occurrence order.

    Pure function - no I/O.
    """
    seen: dict[str, None] = {}
    for event in events:
        if event is None:
            continue
        label = event.category_label
        if label:
            seen.setdefault(label, None)
    return list(seen)


def matches_date(event: Event, selected_date: date | None, tz: tzinfo | None = None) -> bool:
    if selected_date is None:
        return True
    return event.start_date(tz) == selected_date


def matches_search(event: Event, query: str) -> bool:
    term = query.lower()
    if not term:
        return True
    return term in event.name.lower() or term in event.description.lower()


def matches_category(event: Event, category: str) -> bool:
    # Raw category, not the label: "Uncategorized" never matches ""
    return category == "" or event.category == category


def matches_preferences(event: Event, preferences: tuple[str, ...]) -> bool:
    return not preferences or event.category_label in preferences


def filter_events(
    events: list[Event | None],
    filters: FilterState,
    tz: tzinfo | None = None,
) -> list[Event]:
    """
    Events matching every active filter, in their original order.

    Pure function - no I/O.

    Args:
        events: Normalized events; None entries are dropped
        filters: Current filter state
        tz: Zone used for the day comparison (None = system local time)

    Returns:
        Subsequence of events
    """
    return [
        e
        for e in events
        if e is not None
        and matches_date(e, filters.selected_date, tz)
        and matches_search(e, filters.search_query)
        and matches_category(e, filters.category)
        and matches_preferences(e, filters.preferences)
    ]
