"""Ports - interfaces/protocols for external dependencies."""

from .event_source import EventsResponse, FetchFunction

__all__ = [
    "EventsResponse",
    "FetchFunction",
]
