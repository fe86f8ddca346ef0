"""Remote event source interface."""

from typing import Any, Awaitable, Protocol

from gcal_cache.core.events import EventsRequest


class EventsResponse(Protocol):
    """The parts of an HTTP response the fetcher reads. requests.Response fits."""

    ok: bool
    status_code: int
    reason: str

    def json(self) -> Any:
        """Decode the body. Events responses carry an "items" list."""
        ...


class FetchFunction(Protocol):
    """Interface for calling the events endpoint of any backend."""

    def __call__(self, request: EventsRequest) -> Awaitable[EventsResponse]:
        """Send the request and resolve to its response."""
        ...
