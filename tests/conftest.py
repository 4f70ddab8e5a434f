"""Pytest configuration and fixtures for speedruncom tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from speedruncom import SpeedrunHttpClient


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
async def reset_shared() -> AsyncIterator[None]:
    """Drop the process-wide transport after the test."""
    yield
    await SpeedrunHttpClient.close_shared()


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    set_cookies: Iterable[str] = (),
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        set_cookies: Values of Set-Cookie headers
        json_error: Exception raised by json() instead of returning

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status
    response.headers = CIMultiDictProxy(
        CIMultiDict(("Set-Cookie", cookie) for cookie in set_cookies)
    )

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
