"""Async client for the speedrun.com v2 API."""

__version__ = "0.1.0"

from .client import AuthState, LoginResult, SpeedrunClient
from .config import ClientConfig
from .endpoints import ENDPOINTS, Endpoint, get_endpoint
from .errors import (
    TRANSPORT_FAILURE,
    SpeedrunAuthError,
    SpeedrunClientError,
    SpeedrunConnectionError,
    SpeedrunResponseError,
    SpeedrunTimeout,
)
from .http import SpeedrunHttpClient
from .protocol import (
    BASE_URL,
    decode_query_payload,
    encode_query_payload,
    parse_session_cookie,
)

__all__ = [
    "BASE_URL",
    "ENDPOINTS",
    "TRANSPORT_FAILURE",
    "AuthState",
    "ClientConfig",
    "Endpoint",
    "LoginResult",
    "SpeedrunAuthError",
    "SpeedrunClient",
    "SpeedrunClientError",
    "SpeedrunConnectionError",
    "SpeedrunHttpClient",
    "SpeedrunResponseError",
    "SpeedrunTimeout",
    "__version__",
    "decode_query_payload",
    "encode_query_payload",
    "get_endpoint",
    "parse_session_cookie",
]
