"""Ports - interfaces/protocols for external dependencies."""

from .event_source import EventSource
from .notification_sink import NotificationSink
from .auth_context import AuthContext

__all__ = [
    "EventSource",
    "NotificationSink",
    "AuthContext",
]
