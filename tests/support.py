"""Sample events and fakes shared by the test modules."""

from datetime import datetime, timezone

API_KEY = "example_api_key"
CALENDAR_ID = "example_calendar@group.calendar.google.com"

EVENTS = {
    "SIMPLE_1": {
        "kind": "calendar#event",
        "id": "simple1",
        "summary": "Simple Event 1",
        "start": {"dateTime": "2026-01-03T12:00:00Z", "timeZone": "America/New_York"},
        "end": {"dateTime": "2026-01-03T13:00:00Z", "timeZone": "America/New_York"},
        "htmlLink": "https://www.google.com/calendar/event?eid=simple1",
    },
    "SIMPLE_2": {
        "kind": "calendar#event",
        "id": "simple2",
        "summary": "Simple Event 2",
        "start": {"dateTime": "2026-01-12T06:00:00Z", "timeZone": "America/New_York"},
        "end": {"dateTime": "2026-01-12T08:30:00Z", "timeZone": "America/New_York"},
        "htmlLink": "https://www.google.com/calendar/event?eid=simple2",
    },
    "ALL_DAY_1": {
        "kind": "calendar#event",
        "id": "allday1",
        "summary": "All Day Event 1",
        "start": {"date": "2026-01-15"},
        "end": {"date": "2026-01-16"},
        "htmlLink": "https://www.google.com/calendar/event?eid=allday1",
    },
    "ALL_DAY_2": {
        "kind": "calendar#event",
        "id": "allday2",
        "summary": "All Day Event 2",
        "start": {"date": "2026-01-20"},
        "end": {"date": "2026-01-21"},
        "htmlLink": "https://www.google.com/calendar/event?eid=allday2",
    },
    "VERY_LONG_1": {
        "kind": "calendar#event",
        "id": "verylong1",
        "summary": "Very Long Event 1",
        "start": {"dateTime": "2025-02-13T09:00:00Z", "timeZone": "America/New_York"},
        "end": {"dateTime": "2027-08-26T17:00:00Z", "timeZone": "America/New_York"},
        "htmlLink": "https://www.google.com/calendar/event?eid=verylong1",
    },
    "DETAILED_1": {
        "kind": "calendar#event",
        "id": "detailed1",
        "summary": "Detailed Event 1",
        "start": {"dateTime": "2026-01-22T03:00:00Z", "timeZone": "America/New_York"},
        "end": {"dateTime": "2026-01-22T03:30:00Z", "timeZone": "America/New_York"},
        "description": "A detailed event with <b>lots<b/> of details.",
        "location": "1600 Amphitheatre Parkway, Mountain View, CA 94043-1351, USA",
        "attachments": [
            {
                "title": "More Details.pdf",
                "fileUrl": "https://drive.google.com/open?id=moreDetails",
                "mimeType": "application/pdf",
                "iconLink": "https://drive-thirdparty.googleusercontent.com/32/type/application/pdf",
                "fileId": "moreDetails",
            }
        ],
        "htmlLink": "https://www.google.com/calendar/event?eid=detailed1",
    },
}


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, body=None, status_code: int = 200, reason: str = "OK"):
        self._body = body
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return self._body


def events_page(*items) -> dict:
    return {"kind": "calendar#events", "items": list(items)}


def utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def transform_to_string(event) -> str:
    return f"{event['summary']} ({event['id']})"
