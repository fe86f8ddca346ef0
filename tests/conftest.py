"""Shared fixtures for gcal-cache tests."""

from unittest.mock import AsyncMock

import pytest

from support import FakeResponse, events_page


@pytest.fixture
def make_fetch():
    """
    Factory for fetch mocks.

    Each call to the mock returns the next of the given responses (bodies are
    wrapped in a FakeResponse). Once they run out it returns an empty page.
    """

    def _make(*responses) -> AsyncMock:
        queue = list(responses)

        async def _fetch(request):
            if not queue:
                return FakeResponse(events_page())
            response = queue.pop(0)
            return response if isinstance(response, FakeResponse) else FakeResponse(response)

        return AsyncMock(side_effect=_fetch)

    return _make


@pytest.fixture
def forbidden():
    return FakeResponse(None, status_code=403, reason="Forbidden")
