"""High-level client for the speedrun.com v2 API.

This module provides the API surface callers use. It handles:
- The login handshake, including the emailed second-factor token
- Logout, which differs between browser and non-browser contexts
- One generated coroutine per catalog endpoint

Usage:
    async with SpeedrunClient(user_agent="my-bot") as client:
        result = await client.login("alice", "secret1")
        if result.state is AuthState.AWAITING_SECOND_FACTOR:
            result = await client.set_token(input("Token: "))
        summary = await client.get_user_summary(url="alice")
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import TracebackType
from typing import Any

import aiohttp

from .config import ClientConfig
from .endpoints import AUTH_ENDPOINTS, AUTH_LOGIN, AUTH_LOGOUT, ENDPOINTS, Endpoint
from .errors import SpeedrunAuthError
from .http import SpeedrunHttpClient
from .protocol import Verb

_LOGGER = logging.getLogger(__name__)


class AuthState(Enum):
    """Where the client is in the login handshake."""

    UNAUTHENTICATED = "unauthenticated"
    AWAITING_SECOND_FACTOR = "awaiting_second_factor"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a ``login()`` or ``set_token()`` call."""

    state: AuthState
    data: Any = None

    @property
    def token_challenge_sent(self) -> bool:
        return self.state is AuthState.AWAITING_SECOND_FACTOR


@dataclass(slots=True)
class _PendingCredentials:
    name: str
    password: str = field(repr=False)


class SpeedrunClient:
    """Client for speedrun.com API endpoints.

    A client is bound to one ``SpeedrunHttpClient``. Use a separate client
    per user session; ``SpeedrunClient.anonymous()`` shares one transport
    across the process and is meant for public data only.
    """

    def __init__(
        self,
        http: SpeedrunHttpClient | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        config: ClientConfig | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize client.

        Args:
            http: Transport to dispatch through. Built from the remaining
                arguments when omitted.
            session: aiohttp session for a newly built transport
            config: Configuration for a newly built transport
            **overrides: ``ClientConfig`` fields, e.g. ``session_id``
        """
        self.http = http or SpeedrunHttpClient(session, config=config, **overrides)
        self._state = AuthState.UNAUTHENTICATED
        self._pending: _PendingCredentials | None = None

    @classmethod
    def anonymous(cls) -> SpeedrunClient:
        """Return a client bound to the process-wide anonymous transport."""
        return cls(SpeedrunHttpClient.shared())

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def session_id(self) -> str | None:
        return self.http.session_id

    async def request(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        verb: Verb = "post",
        *,
        timeout: float | None = None,
    ) -> Any:
        """Call any endpoint by name through the bound transport."""
        return await self.http.request(endpoint, params, verb, timeout=timeout)

    async def login(self, username: str, password: str) -> LoginResult:
        """Log in with a username and password.

        Outside a browser this authenticates the client itself; in a browser
        it authenticates the browser's cookies. If the account has two-factor
        authentication the result is ``AWAITING_SECOND_FACTOR`` and the token
        emailed to the account must be passed to ``set_token()``.
        """
        self._pending = _PendingCredentials(username, password)
        data = await self.request(
            AUTH_LOGIN.name, {"name": username, "password": password}
        )
        return self._advance(data)

    async def set_token(self, token: str) -> LoginResult:
        """Finish a two-factor login with the token sent by ``login()``.

        Raises:
            SpeedrunAuthError: If ``login()`` has not been called
        """
        pending = self._pending
        if pending is None:
            raise SpeedrunAuthError("set_token() requires a prior login()")
        data = await self.request(
            AUTH_LOGIN.name,
            {"name": pending.name, "password": pending.password, "token": token},
        )
        return self._advance(data)

    async def logout(self) -> None:
        """Log out.

        In a browser the API is asked to expire its cookie. Otherwise the
        session id only lives in this client and is simply dropped.
        """
        if self.http.config.browser:
            await self.request(AUTH_LOGOUT.name)
        else:
            self.http.clear_session()
        self._pending = None
        self._state = AuthState.UNAUTHENTICATED
        _LOGGER.debug("Logged out")

    def _advance(self, data: Any) -> LoginResult:
        response = data if isinstance(data, Mapping) else {}
        if response.get("loggedIn"):
            state = AuthState.AUTHENTICATED
            self._pending = None
        elif response.get("tokenChallengeSent"):
            state = AuthState.AWAITING_SECOND_FACTOR
        else:
            state = AuthState.UNAUTHENTICATED
        self._state = state
        _LOGGER.debug("Login state: %s", state.value)
        return LoginResult(state, data)

    async def close(self) -> None:
        """Close the transport, unless it is the shared one."""
        if not self.http.is_shared:
            await self.http.close()

    async def __aenter__(self) -> SpeedrunClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


def _endpoint_method(endpoint: Endpoint) -> Callable[..., Awaitable[Any]]:
    # ``params`` is positional-only so endpoints with a ``params`` field
    # can still take it as a keyword
    async def call(
        self: SpeedrunClient,
        params: Mapping[str, Any] | None = None,
        /,
        *,
        verb: Verb | None = None,
        timeout: float | None = None,
        **fields: Any,
    ) -> Any:
        payload = {**(params or {}), **fields}
        data = await self.request(
            endpoint.name, payload, verb or endpoint.verb, timeout=timeout
        )
        return data if endpoint.has_response else None

    call.__name__ = endpoint.method_name
    call.__qualname__ = f"SpeedrunClient.{endpoint.method_name}"
    call.__doc__ = (
        f"Call ``{endpoint.name}`` (``{endpoint.verb.upper()}`` by default)."
    )
    return call


for _endpoint in ENDPOINTS.values():
    if _endpoint.name not in AUTH_ENDPOINTS:
        setattr(SpeedrunClient, _endpoint.method_name, _endpoint_method(_endpoint))
del _endpoint
