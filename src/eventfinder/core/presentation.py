"""Per-event card projection and listing snapshot - no I/O."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

from .events import Event, FilterState


class ListingPhase(Enum):
    """Which of the mutually exclusive listing branches to render."""

    LOADING = "loading"
    EMPTY = "empty"
    LIST = "list"


def seats_left(event: Event) -> int | None:
    """Capacity minus attendee count. None when the attendee list is unknown."""
    if event.attendees is None:
        return None
    return event.capacity - len(event.attendees)


def _noop() -> None:
    pass


@dataclass
class EventCard:
    """Fields a card renderer needs for one event."""

    id: str
    title: str
    description: str
    category: str
    start: datetime | None
    end: datetime | None
    image_url: str
    location: str
    capacity: int
    attendee_count: int
    organizer_name: str | None
    seats_left: int | None
    on_rsvp: Callable[[], None] = field(default=_noop, repr=False, compare=False)

    def format_time(self) -> str:
        if not self.start:
            return "TBA"
        return self.start.strftime("%a %b %d %H:%M")

    def format_seats(self) -> str:
        if self.seats_left is None:
            return "seats unknown"
        if self.seats_left <= 0:
            return "full"
        return f"{self.seats_left} seats left"


def adapt_event(event: Event, on_rsvp: Callable[[], None]) -> EventCard:
    """Project an event onto a card and wire its RSVP callback."""
    return EventCard(
        id=event.id,
        title=event.name,
        description=event.description,
        category=event.category_label,
        start=event.start,
        end=event.end,
        image_url=event.image_url,
        location=event.location,
        capacity=event.capacity,
        attendee_count=len(event.attendees or []),
        organizer_name=event.organizer_name,
        seats_left=seats_left(event),
        on_rsvp=on_rsvp,
    )


def adapt_events(events: list[Event], on_rsvp: Callable[[], None]) -> list[EventCard]:
    return [adapt_event(e, on_rsvp) for e in events]


@dataclass
class EventListing:
    """Everything the render layer needs for one frame."""

    loading: bool
    cards: list[EventCard]
    categories: list[str]
    filters: FilterState

    @property
    def phase(self) -> ListingPhase:
        if self.loading:
            return ListingPhase.LOADING
        if not self.cards:
            return ListingPhase.EMPTY
        return ListingPhase.LIST

    @property
    def heading(self) -> str:
        if self.filters.selected_date:
            return f"Events on {self.filters.selected_date.isoformat()}"
        return "All Events"


def format_card(card: EventCard) -> str:
    """One-line text rendering of a card."""
    line = f"{card.format_time():16} {card.title or 'Untitled'} [{card.category}]"
    if card.location:
        line += f" @ {card.location}"
    if card.organizer_name:
        line += f" by {card.organizer_name}"
    return f"{line} ({card.format_seats()})"
