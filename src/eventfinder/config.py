"""Configuration management for eventfinder."""

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

EVENTFINDER_HOME = Path(os.environ.get("EVENTFINDER_HOME", Path.home() / "eventfinder"))
CONFIG_FILE = EVENTFINDER_HOME / "config" / "eventfinder.conf"

DEFAULT_TIMEOUT = 10.0


@dataclass
class Config:
    """eventfinder configuration."""

    api_base_url: str = ""
    api_token: str = ""
    # Identity reported to the auth context; never the API token
    user: str = ""
    events_file: str = ""
    # IANA zone for date filtering; empty means system local time
    timezone: str = ""
    request_timeout: float = DEFAULT_TIMEOUT

    def tzinfo(self) -> tzinfo | None:
        """Resolve the configured timezone. None if unset or unknown."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone '{self.timezone}', using local time")
            return None


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from eventfinder.conf, then apply env overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "api_base_url":
                    config.api_base_url = value.rstrip("/")
                case "api_token":
                    config.api_token = value
                case "user":
                    config.user = value
                case "events_file":
                    config.events_file = value
                case "timezone":
                    config.timezone = value
                case "request_timeout":
                    try:
                        config.request_timeout = float(value)
                    except ValueError:
                        logger.warning(f"Invalid REQUEST_TIMEOUT '{value}', using {DEFAULT_TIMEOUT}")
                case _:
                    logger.debug(f"Ignoring unknown config key: {key}")

    if url := os.environ.get("EVENTFINDER_API_URL"):
        config.api_base_url = url.rstrip("/")
    if token := os.environ.get("EVENTFINDER_API_TOKEN"):
        config.api_token = token

    return config
