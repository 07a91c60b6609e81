"""Adapters - I/O implementations of ports."""

from .http_event_source import HttpEventSource, EventFetchError
from .json_file import JsonFileEventSource
from .notifiers import LoggingNotifier, ConsoleNotifier
from .static_auth import StaticAuthContext

__all__ = [
    "HttpEventSource",
    "EventFetchError",
    "JsonFileEventSource",
    "LoggingNotifier",
    "ConsoleNotifier",
    "StaticAuthContext",
]
