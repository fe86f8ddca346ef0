"""FullCalendar adapter - serves fetched events as FullCalendar event input."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from gcal_cache.core.events import GoogleCalendarEvent, is_all_day_event
from gcal_cache.fetcher import ConfigurationError, GoogleCalendarEventFetcher

logger = logging.getLogger(__name__)

# Event source options understood by this adapter
EVENT_SOURCE_REFINERS = ("googleCalendarApiKey", "googleCalendarId", "customFetch")

EventInput = dict[str, Any]


def to_event_input(event: GoogleCalendarEvent) -> EventInput:
    """Transform a Google Calendar event into a FullCalendar event."""
    start = event["start"]
    end = event["end"]
    return {
        "title": event.get("summary"),
        "allDay": is_all_day_event(event),
        "start": start["date"] if "date" in start else start["dateTime"],
        "end": end["date"] if "date" in end else end["dateTime"],
        "extendedProps": {
            "attachments": event.get("attachments"),
            "description": event.get("description"),
            "location": event.get("location"),
        },
    }


@dataclass
class GoogleCalendarEventSourceMeta:
    """The data kept by one FullCalendar event source."""

    event_fetcher: GoogleCalendarEventFetcher[EventInput]


def parse_meta(raw: dict[str, Any]) -> GoogleCalendarEventSourceMeta | None:
    """
    Build the event source for raw FullCalendar options.

    Returns None for sources without a googleCalendarId, which belong to
    some other event source type.
    """
    calendar_id = raw.get("googleCalendarId")
    if calendar_id is None:
        return None

    api_key = raw.get("googleCalendarApiKey")
    if api_key is None:
        raise ConfigurationError("googleCalendarApiKey is required")

    return GoogleCalendarEventSourceMeta(
        event_fetcher=GoogleCalendarEventFetcher(
            api_key=str(api_key),
            calendar_id=str(calendar_id),
            fetch=raw.get("customFetch"),
            transform=to_event_input,
        )
    )


async def fetch_source(
    meta: GoogleCalendarEventSourceMeta,
    start: datetime,
    end: datetime,
    success: Callable[[dict[str, list[EventInput]]], None],
    error: Callable[[Exception], None],
) -> None:
    """Fetch a visible range and hand the outcome to FullCalendar's callbacks."""
    try:
        events = await meta.event_fetcher.fetch_events(start, end)
    except Exception as e:
        logger.debug(f"Event source fetch failed: {e}")
        error(e)
        return
    success({"rawEvents": events})
