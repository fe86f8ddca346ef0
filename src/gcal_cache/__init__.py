"""gcal-cache - a deduplicating client-side cache for Google Calendar events."""

from .core.ranges import InvalidRangeError, RangeSet, is_valid_range
from .fetcher import ConfigurationError, FetchError, GoogleCalendarEventFetcher

__all__ = [
    "ConfigurationError",
    "FetchError",
    "GoogleCalendarEventFetcher",
    "InvalidRangeError",
    "RangeSet",
    "is_valid_range",
]
