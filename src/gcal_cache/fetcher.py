"""Deduplicating Google Calendar event fetcher."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Generic, TypeVar

from gcal_cache.core.events import EventsRequest, GoogleCalendarEvent, from_millis, to_iso, to_millis
from gcal_cache.core.ranges import InvalidRangeError, Range, RangeSet
from gcal_cache.ports.event_source import EventsResponse, FetchFunction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigurationError(ValueError):
    """Raised when a fetcher is constructed with invalid options."""

    pass


class FetchError(Exception):
    """Raised when the events endpoint answers with a non-success status."""

    def __init__(self, message: str, response: EventsResponse):
        super().__init__(message)
        self.response = response


def _identity(event: GoogleCalendarEvent) -> Any:
    return event


class GoogleCalendarEventFetcher(Generic[T]):
    """
    Fetches events from a Google Calendar, never asking twice for the same time.

    Every successfully requested span is remembered, so a later request only
    calls the API for the parts not yet covered. Concurrent requests for
    overlapping spans share the calls already in flight. Events from all
    calls are merged by ID into one collection.
    """

    def __init__(
        self,
        api_key: str,
        calendar_id: str,
        *,
        always_fetch_fresh: bool = False,
        fetch: FetchFunction | None = None,
        transform: Callable[[GoogleCalendarEvent], T] | None = None,
    ):
        """
        Initialize the fetcher.

        Args:
            api_key: API key for the Google Calendar API.
            calendar_id: ID of the calendar to fetch events from.
            always_fetch_fresh: Re-request every window instead of reusing
                what was already fetched. Requests made in this mode are not
                remembered as covered.
            fetch: Function sending the API request. Defaults to a RequestsFetcher.
            transform: Function mapping each raw event to the stored value.

        Raises:
            ConfigurationError: If any option has the wrong type or is empty.
        """
        if not isinstance(api_key, str) or not api_key:
            raise ConfigurationError("api_key is a required string")
        if not isinstance(calendar_id, str) or not calendar_id:
            raise ConfigurationError("calendar_id is a required string")
        if not isinstance(always_fetch_fresh, bool):
            raise ConfigurationError("always_fetch_fresh must be a boolean")
        if fetch is not None and not callable(fetch):
            raise ConfigurationError("fetch must be a function")
        if transform is not None and not callable(transform):
            raise ConfigurationError("transform must be a function")

        if fetch is None:
            from gcal_cache.adapters.requests_fetch import RequestsFetcher

            fetch = RequestsFetcher()

        self._api_key = api_key
        self._calendar_id = calendar_id
        self._always_fetch_fresh = always_fetch_fresh
        self._fetch = fetch
        self._transform = transform or _identity

        self._requested_ranges = RangeSet()
        self._pending_requests: set[asyncio.Task] = set()
        self._all_events: dict[str, T] = {}
        self._subscribers: set[Callable[[list[T]], None]] = set()

    @property
    def all_events(self) -> list[T]:
        """All events fetched so far, in the order they were first seen."""
        return list(self._all_events.values())

    async def fetch_events(self, start: datetime, end: datetime) -> list[T]:
        """
        Fetch all events within a time window.

        Only the parts of the window not already requested are fetched. Also
        waits for any request still in flight from earlier calls, so the result
        includes everything requested before this call.

        Returns:
            all_events once every relevant request has settled.

        Raises:
            InvalidRangeError: If start is not before end.
            FetchError: If any request needed for the window failed.
        """
        range_ = (to_millis(start), to_millis(end))
        if range_[0] >= range_[1]:
            raise InvalidRangeError("Invalid date range: 'from' must be before 'to'.")

        if self._always_fetch_fresh:
            await self._request_events(range_, track_coverage=False)
            return self.all_events

        existing_requests = list(self._pending_requests)
        missing_ranges = self._requested_ranges.inverse().intersection(RangeSet([range_]))
        logger.debug(f"{self._calendar_id}: {len(missing_ranges)} missing range(s) for {range_}")
        new_requests = [self._request_events(missing) for missing in missing_ranges]

        results = await asyncio.gather(*new_requests, *existing_requests, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result

        return self.all_events

    def subscribe(self, callback: Callable[[list[T]], None]) -> Callable[[], None]:
        """
        Subscribe to changes in the fetched events.

        The callback is called immediately with all_events, then again each
        time a request adds events.

        Returns:
            A function that unsubscribes the callback.
        """
        self._subscribers.add(callback)
        callback(self.all_events)

        def unsubscribe() -> None:
            self._subscribers.discard(callback)

        return unsubscribe

    def _request_events(self, range_: Range, track_coverage: bool = True) -> asyncio.Task:
        """Claim a range and start requesting its events."""
        if track_coverage:
            self._requested_ranges.add_range(range_)
        task = asyncio.create_task(self._receive_events(range_, track_coverage))
        self._pending_requests.add(task)
        return task

    async def _receive_events(self, range_: Range, track_coverage: bool) -> None:
        try:
            try:
                response = await self._call_google_api(range_)
                for event in response.get("items", []):
                    self._all_events[event["id"]] = self._transform(event)
                self._notify_subscribers()
            except Exception:
                if track_coverage:
                    logger.debug(f"{self._calendar_id}: releasing {range_} after failed request")
                    self._requested_ranges.remove_range(range_)
                raise
        finally:
            self._pending_requests.discard(asyncio.current_task())

    async def _call_google_api(self, range_: Range) -> dict[str, Any]:
        """Make the actual Google Calendar API call."""
        request = EventsRequest(
            calendar_id=self._calendar_id,
            api_key=self._api_key,
            time_min=to_iso(range_[0]),
            time_max=to_iso(range_[1]),
        )
        logger.debug(
            f"Requesting {self._calendar_id} events from {from_millis(range_[0])} to {from_millis(range_[1])}"
        )
        response = await self._fetch(request)
        if not response.ok:
            raise FetchError(f"Failed to fetch events: {response.status_code} {response.reason}", response)
        return response.json()

    def _notify_subscribers(self) -> None:
        for subscriber in list(self._subscribers):
            subscriber(self.all_events)
