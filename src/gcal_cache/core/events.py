"""Pure Google Calendar event logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from typing import Any
from urllib.parse import quote

API_BASE = "https://www.googleapis.com/calendar/v3"

# Raw Google Calendar event resource, as decoded from the API's JSON.
# https://developers.google.com/workspace/calendar/api/v3/reference/events#resource-representations
GoogleCalendarEvent = dict[str, Any]


@dataclass(frozen=True)
class EventsRequest:
    """A request for all events of a calendar within a time window.

    Recurring events are always expanded into single occurrences.
    """

    calendar_id: str
    api_key: str
    time_min: str
    time_max: str
    single_events: bool = True

    @property
    def url(self) -> str:
        return f"{API_BASE}/calendars/{quote(self.calendar_id, safe='@')}/events"

    @property
    def params(self) -> dict[str, str]:
        return {
            "key": self.api_key,
            "timeMin": self.time_min,
            "timeMax": self.time_max,
            "singleEvents": "true" if self.single_events else "false",
        }


def to_millis(dt: datetime) -> int:
    """Convert a datetime to Unix epoch milliseconds. Naive datetimes are UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return round(dt.timestamp() * 1000)


def from_millis(ms: float) -> datetime:
    """Convert Unix epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def to_iso(ms: float) -> str:
    """Format epoch milliseconds like 2026-01-01T00:00:00.000Z."""
    return from_millis(ms).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_all_day_event(event: GoogleCalendarEvent) -> bool:
    """Check if an event from Google Calendar is an all-day event."""
    return "date" in event.get("start", {})


def convert_to_datetime(boundary: dict[str, str], tz: tzinfo = timezone.utc) -> datetime:
    """
    Convert a Google Calendar event start or end to a datetime.

    All-day boundaries ({"date": "yyyy-mm-dd"}) become midnight in tz.
    Timed boundaries ({"dateTime": RFC3339, "timeZone": ...}) keep their own offset.
    """
    if "date" in boundary:
        return datetime.combine(date.fromisoformat(boundary["date"]), time(0, 0), tzinfo=tz)
    value = boundary["dateTime"]
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
