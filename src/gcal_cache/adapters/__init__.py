"""Adapters - I/O implementations of ports."""

from .requests_fetch import RequestsFetcher
from .fullcalendar import (
    EVENT_SOURCE_REFINERS,
    GoogleCalendarEventSourceMeta,
    fetch_source,
    parse_meta,
    to_event_input,
)

__all__ = [
    "RequestsFetcher",
    "EVENT_SOURCE_REFINERS",
    "GoogleCalendarEventSourceMeta",
    "fetch_source",
    "parse_meta",
    "to_event_input",
]
