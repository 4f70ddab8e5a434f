"""Client error types for speedrun.com API interactions."""

from __future__ import annotations

from typing import Final

# Status classification for failures where no HTTP response was received
TRANSPORT_FAILURE: Final = 0

UNKNOWN_ERROR: Final = "Unknown error"


class SpeedrunClientError(Exception):
    """Base error for speedrun.com client failures."""

    def __init__(self, message: str, status: int = TRANSPORT_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class SpeedrunConnectionError(SpeedrunClientError):
    """No response was received from the API."""


class SpeedrunTimeout(SpeedrunConnectionError):
    """Timeout while communicating with the API."""


class SpeedrunResponseError(SpeedrunClientError):
    """HTTP error response from the API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message, status)


class SpeedrunAuthError(SpeedrunClientError):
    """The login protocol was used out of order."""
