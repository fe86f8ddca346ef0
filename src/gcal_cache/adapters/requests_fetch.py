"""HTTP adapter - sends events requests with requests."""

import asyncio
import logging

import requests

from gcal_cache.core.events import EventsRequest

logger = logging.getLogger(__name__)


class RequestsFetcher:
    """
    requests-backed fetch function.

    Implements FetchFunction protocol. The blocking call runs in a worker
    thread so the event loop keeps serving other fetches meanwhile.
    No business logic - just I/O.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float | None = 30):
        self._session = session or requests.Session()
        self.timeout = timeout

    async def __call__(self, request: EventsRequest) -> requests.Response:
        logger.debug(f"GET {request.url} timeMin={request.time_min} timeMax={request.time_max}")
        return await asyncio.to_thread(self._get, request)

    def _get(self, request: EventsRequest) -> requests.Response:
        return self._session.get(request.url, params=request.params, timeout=self.timeout)
