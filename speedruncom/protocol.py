"""Wire helpers for the speedrun.com v2 API."""

from __future__ import annotations

import base64
import json
import re
from collections.abc import Iterable, Mapping
from typing import Any, Final, Literal

Verb = Literal["get", "post"]

BASE_URL: Final = "https://www.speedrun.com/api/v2"
BASE_USER_AGENT: Final = "speedruncom.py"

SESSION_COOKIE: Final = "PHPSESSID"
QUERY_PARAM: Final = "_r"

DEFAULT_HEADERS: Final[Mapping[str, str]] = {
    "Accept-Language": "en",
    "Accept": "application/json",
}

_WHITESPACE = re.compile(r"\s+")


def build_user_agent(suffix: str | None = None) -> str:
    """Build the outbound User-Agent, optionally suffixed with ``/suffix``."""
    if suffix:
        return f"{BASE_USER_AGENT}/{suffix}"
    return BASE_USER_AGENT


def build_session_cookie(session_id: str) -> str:
    """Build the ``Cookie`` header value carrying the session id."""
    return f"{SESSION_COOKIE}={session_id}"


def encode_query_payload(params: Mapping[str, Any]) -> str:
    """Encode a parameter payload for the ``_r`` query parameter.

    The payload is serialized to compact JSON, stripped of all whitespace
    (including whitespace inside string values, as the API expects) and
    base64 encoded.
    """
    compact = json.dumps(params, separators=(",", ":"), ensure_ascii=False)
    compact = _WHITESPACE.sub("", compact)
    # Lone surrogates become U+FFFD
    compact = compact.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    return base64.b64encode(compact.encode("utf-8")).decode("ascii")


def decode_query_payload(value: str) -> Any:
    """Decode a ``_r`` query value back into its parameter payload."""
    return json.loads(base64.b64decode(value).decode("utf-8"))


def parse_session_cookie(set_cookies: Iterable[str]) -> str | None:
    """Extract the session id from ``Set-Cookie`` header values.

    Returns the value of the first ``PHPSESSID=...`` cookie, or ``None``
    if no header carries one.
    """
    prefix = f"{SESSION_COOKIE}="
    for header in set_cookies:
        # A single header may hold several comma-joined cookies
        for cookie in header.split(","):
            cookie = cookie.strip()
            if not cookie.startswith(prefix):
                continue
            value = cookie[len(prefix) :].split(";", 1)[0].strip()
            if value:
                return value
    return None
