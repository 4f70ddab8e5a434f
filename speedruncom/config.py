"""Client configuration for the speedrun.com API."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

from .protocol import BASE_URL, DEFAULT_HEADERS

DEFAULT_TIMEOUT = 30.0


def running_in_browser() -> bool:
    """Return True when running inside a browser (Pyodide)."""
    return sys.platform == "emscripten"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for a transport instance.

    ``browser`` marks a context where the platform's cookie jar owns the
    session: no User-Agent override, no manual ``Cookie`` header.
    """

    base_url: str = BASE_URL
    language: str = DEFAULT_HEADERS["Accept-Language"]
    accept: str = DEFAULT_HEADERS["Accept"]
    user_agent: str | None = None
    session_id: str | None = field(default=None, repr=False)
    browser: bool = field(default_factory=running_in_browser)
    timeout: float = DEFAULT_TIMEOUT

    def with_overrides(self, **overrides: Any) -> ClientConfig:
        """Return a new config with the provided overrides."""
        return replace(self, **overrides)
