"""Functional core - pure logic with no I/O."""

from .ranges import InvalidRangeError, Range, RangeSet, is_valid_range
from .events import (
    EventsRequest,
    GoogleCalendarEvent,
    convert_to_datetime,
    from_millis,
    is_all_day_event,
    to_iso,
    to_millis,
)

__all__ = [
    # Ranges
    "InvalidRangeError",
    "Range",
    "RangeSet",
    "is_valid_range",
    # Events
    "EventsRequest",
    "GoogleCalendarEvent",
    "convert_to_datetime",
    "from_millis",
    "is_all_day_event",
    "to_iso",
    "to_millis",
]
