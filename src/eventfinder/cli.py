"""eventfinder CLI - browse and filter events."""

import json
import logging
import sys

import click

from .adapters import (
    ConsoleNotifier,
    HttpEventSource,
    JsonFileEventSource,
    LoggingNotifier,
    StaticAuthContext,
)
from .config import Config, load_config
from .core.presentation import EventListing, ListingPhase, format_card
from .ports import EventSource, NotificationSink
from .store import EventStore, LoadState


@click.group()
@click.version_option(package_name="eventfinder")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """eventfinder - Event discovery CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _build_source(config: Config, file_path: str | None) -> EventSource:
    """Pick the event source: --file, then EVENTS_FILE, then API_BASE_URL."""
    if file_path:
        return JsonFileEventSource(file_path)
    if config.events_file:
        return JsonFileEventSource(config.events_file)
    if config.api_base_url:
        return HttpEventSource.from_config(config)
    click.echo(
        "Error: No event source configured. Pass --file or set API_BASE_URL in eventfinder.conf",
        err=True,
    )
    sys.exit(1)


def _load_store(file_path: str | None, as_json: bool) -> EventStore:
    config = load_config()
    # Scripted (--json) runs report fetch errors through logging
    notifier: NotificationSink = LoggingNotifier() if as_json else ConsoleNotifier()
    store = EventStore(_build_source(config, file_path), notifier, tz=config.tzinfo())
    store.bind_user(StaticAuthContext(config.user or None).current_user())
    return store


def _show_listing(listing: EventListing, as_json: bool) -> None:
    """Shared listing display logic."""
    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": c.id,
                        "title": c.title,
                        "category": c.category,
                        "start": c.start.isoformat() if c.start else None,
                        "end": c.end.isoformat() if c.end else None,
                        "location": c.location,
                        "organizer": c.organizer_name,
                        "capacity": c.capacity,
                        "seats_left": c.seats_left,
                    }
                    for c in listing.cards
                ],
                indent=2,
            )
        )
        return

    click.echo(f"### {listing.heading}")
    match listing.phase:
        case ListingPhase.LOADING:
            click.echo("Loading...")
        case ListingPhase.EMPTY:
            click.echo("No events found")
        case ListingPhase.LIST:
            for card in listing.cards:
                click.echo(f"  {format_card(card)}")


@main.command()
@click.option("--date", "on_date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Only events starting on this day")
@click.option("--search", default="", help="Case-insensitive text in title or description")
@click.option("--category", default="", help="Exact category")
@click.option("--prefer", "preferences", multiple=True, help="Allowed category (repeatable)")
@click.option("--file", "file_path", type=click.Path(dir_okay=False), help="Read events from a JSON file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def events(on_date, search: str, category: str, preferences: tuple[str, ...], file_path, as_json: bool):
    """List events matching the given filters."""
    store = _load_store(file_path, as_json)

    if on_date:
        store.set_selected_date(on_date.date())
    store.set_search_query(search)
    store.set_category(category)
    store.set_preferences(list(preferences))

    _show_listing(store.view(), as_json)
    if store.state is LoadState.ERROR:
        sys.exit(1)


@main.command()
@click.option("--file", "file_path", type=click.Path(dir_okay=False), help="Read events from a JSON file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def categories(file_path, as_json: bool):
    """List the distinct event categories."""
    store = _load_store(file_path, as_json)
    labels = store.categories()

    if as_json:
        click.echo(json.dumps(labels, indent=2))
    elif not labels:
        click.echo("No categories.")
    else:
        for label in labels:
            click.echo(f"• {label}")

    if store.state is LoadState.ERROR:
        sys.exit(1)