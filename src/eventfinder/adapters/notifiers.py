"""Notification sink adapters."""

import logging

import click

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Implements NotificationSink protocol by logging at ERROR level."""

    def notify_error(self, message: str) -> None:
        logger.error(message)


class ConsoleNotifier:
    """Implements NotificationSink protocol by echoing to stderr."""

    def notify_error(self, message: str) -> None:
        click.secho(f"Error: {message}", fg="red", err=True)
