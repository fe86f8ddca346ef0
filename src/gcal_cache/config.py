"""Configuration management for gcal-cache."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GCAL_CACHE_HOME = Path(os.environ.get("GCAL_CACHE_HOME", Path.home() / ".gcal-cache"))
CONFIG_FILE = GCAL_CACHE_HOME / "config" / "gcal-cache.conf"

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


@dataclass
class Config:
    """gcal-cache configuration."""

    api_key: str = ""
    calendar_id: str = ""
    always_fetch_fresh: bool = False
    timeout: float = 30.0
    timezone: str = "UTC"

    def build_fetcher(self, **overrides):
        """Create an event fetcher from this configuration."""
        from .adapters.requests_fetch import RequestsFetcher
        from .fetcher import GoogleCalendarEventFetcher

        options = {"always_fetch_fresh": self.always_fetch_fresh}
        options.update(overrides)
        if "fetch" not in options:
            options["fetch"] = RequestsFetcher(timeout=self.timeout)
        return GoogleCalendarEventFetcher(self.api_key, self.calendar_id, **options)


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Ignoring {key.upper()}={value!r}: expected true or false")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from gcal-cache.conf, then apply environment overrides."""
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
                case "api_key":
                    config.api_key = value
                case "calendar_id":
                    config.calendar_id = value
                case "always_fetch_fresh":
                    config.always_fetch_fresh = _parse_bool(key, value, config.always_fetch_fresh)
                case "timeout":
                    try:
                        config.timeout = float(value)
                    except ValueError:
                        logger.warning(f"Ignoring TIMEOUT={value!r}: expected a number of seconds")
                case "timezone":
                    config.timezone = value

    # Environment wins over the file
    config.api_key = os.environ.get("GCAL_CACHE_API_KEY", config.api_key)
    config.calendar_id = os.environ.get("GCAL_CACHE_CALENDAR_ID", config.calendar_id)

    return config
