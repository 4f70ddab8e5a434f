"""HTTP transport for the speedrun.com v2 API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, ClassVar

import aiohttp
from aiohttp import hdrs

from .config import ClientConfig
from .errors import (
    UNKNOWN_ERROR,
    SpeedrunConnectionError,
    SpeedrunResponseError,
    SpeedrunTimeout,
)
from .protocol import (
    QUERY_PARAM,
    SESSION_COOKIE,
    Verb,
    build_session_cookie,
    build_user_agent,
    encode_query_payload,
    parse_session_cookie,
)

_LOGGER = logging.getLogger(__name__)


class SpeedrunHttpClient:
    """HTTP client wrapper for speedrun.com API endpoints.

    An instance represents one logical session: the ``PHPSESSID`` returned by
    the API is stored after each successful call and sent with every later
    call made through the same instance. Calls are not synchronized, so when
    the session id matters each call should be awaited before the next one
    is issued.

    Usage:
        async with SpeedrunHttpClient(user_agent="my-bot") as http:
            data = await http.request("GetGameSummary", {"gameUrl": "sm64"}, "get")
    """

    _shared: ClassVar[SpeedrunHttpClient | None] = None

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        config: ClientConfig | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the transport.

        Args:
            session: Session to send requests with. When omitted, one is
                created on first use and closed by ``close()``.
            config: Base configuration, defaults to ``ClientConfig()``.
            **overrides: ``ClientConfig`` fields to override, e.g.
                ``session_id`` or ``user_agent``.
        """
        config = config or ClientConfig()
        if overrides:
            config = config.with_overrides(**overrides)
        self.config = config

        self._session = session
        self._owns_session = session is None

        self._base_headers: dict[str, str] = {
            hdrs.ACCEPT_LANGUAGE: config.language,
            hdrs.ACCEPT: config.accept,
        }
        # Browsers forbid overriding the User-Agent
        if not config.browser:
            self._base_headers[hdrs.USER_AGENT] = build_user_agent(config.user_agent)

        self._session_id: str | None = None
        if config.session_id:
            if config.browser:
                _LOGGER.warning(
                    "A session id cannot be used to authenticate in a browser "
                    "environment; the browser cookie jar is used instead"
                )
            else:
                self._session_id = config.session_id

    @classmethod
    def shared(cls, session: aiohttp.ClientSession | None = None) -> SpeedrunHttpClient:
        """Return the process-wide anonymous transport.

        The shared transport starts without a session id but still stores
        whatever session id the API hands back, so it must never be used for
        authenticated calls: concurrent users would overwrite each other's
        session. ``session`` is only used when the transport is first created.
        """
        if cls._shared is None:
            cls._shared = cls(session)
        return cls._shared

    @classmethod
    async def close_shared(cls) -> None:
        """Close and forget the process-wide transport."""
        shared, cls._shared = cls._shared, None
        if shared is not None:
            await shared.close()

    @property
    def is_shared(self) -> bool:
        return self is type(self)._shared

    @property
    def session_id(self) -> str | None:
        """Session id sent with outbound calls, if any."""
        return self._session_id

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with the next outbound call."""
        headers = dict(self._base_headers)
        if self._session_id and not self.config.browser:
            headers[hdrs.COOKIE] = build_session_cookie(self._session_id)
        return headers

    def clear_session(self) -> None:
        """Forget the stored session id."""
        self._session_id = None
        if self._session is not None:
            self._purge_jar(self._session)

    def _purge_jar(self, session: aiohttp.ClientSession) -> None:
        # aiohttp lets jar cookies override the Cookie header, so outside a
        # browser the jar must never hold the session id
        if not self.config.browser:
            session.cookie_jar.clear(lambda morsel: morsel.key == SESSION_COOKIE)

    def _url(self, endpoint: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{endpoint}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or (self._owns_session and self._session.closed):
            # Outside a browser the session id is tracked by hand
            jar = aiohttp.CookieJar() if self.config.browser else aiohttp.DummyCookieJar()
            self._session = aiohttp.ClientSession(cookie_jar=jar)
            self._owns_session = True
        return self._session

    async def request(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        verb: Verb = "post",
        *,
        timeout: float | None = None,
    ) -> Any:
        """Call an API endpoint and return its decoded JSON response.

        ``post`` sends ``params`` as the JSON body. ``get`` sends it as a
        single base64 encoded ``_r`` query parameter. Both target
        ``{base_url}/{endpoint}``.

        Raises:
            SpeedrunResponseError: If the API returns an error status
            SpeedrunTimeout: If the request times out
            SpeedrunConnectionError: If no response was received
        """
        if verb not in ("get", "post"):
            raise ValueError(f"Unsupported verb: {verb!r}")

        payload = dict(params or {})
        session = self._get_session()
        self._purge_jar(session)
        kwargs: dict[str, Any] = {
            "headers": self.headers,
            "timeout": aiohttp.ClientTimeout(
                total=self.config.timeout if timeout is None else timeout
            ),
        }
        if verb == "post":
            send = session.post
            kwargs["json"] = payload
        else:
            send = session.get
            kwargs["params"] = {QUERY_PARAM: encode_query_payload(payload)}

        _LOGGER.debug("%s %s", verb.upper(), endpoint)
        try:
            async with send(self._url(endpoint), **kwargs) as resp:
                self._purge_jar(session)
                if resp.status >= 400:
                    raise await self._rejection(resp)
                self._rotate_session(resp)
                return await self._decode(resp)
        except TimeoutError as err:
            raise SpeedrunTimeout(f"{endpoint} request timed out") from err
        except aiohttp.ClientError as err:
            raise SpeedrunConnectionError(f"{endpoint} request failed") from err

    def _rotate_session(self, resp: aiohttp.ClientResponse) -> None:
        # In a browser the cookie jar handles Set-Cookie
        if self.config.browser:
            return
        session_id = parse_session_cookie(resp.headers.getall(hdrs.SET_COOKIE, ()))
        if session_id is None:
            return
        if session_id != self._session_id:
            _LOGGER.debug("Session id rotated")
        self._session_id = session_id

    @staticmethod
    async def _decode(resp: aiohttp.ClientResponse) -> Any:
        try:
            return await resp.json(content_type=None)
        except ValueError as err:
            raise SpeedrunResponseError(resp.status, "Invalid JSON response") from err

    @staticmethod
    async def _rejection(resp: aiohttp.ClientResponse) -> SpeedrunResponseError:
        try:
            data = await resp.json(content_type=None)
        except ValueError:
            data = None
        message = data.get("error") if isinstance(data, dict) else None
        _LOGGER.debug("API rejected request with status %s", resp.status)
        return SpeedrunResponseError(resp.status, str(message) if message else UNKNOWN_ERROR)

    async def close(self) -> None:
        """Close the underlying session if this transport created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> SpeedrunHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
