"""Tests for speedrun.com wire helpers."""

from __future__ import annotations

import base64
import json

from speedruncom.protocol import (
    BASE_USER_AGENT,
    build_session_cookie,
    build_user_agent,
    decode_query_payload,
    encode_query_payload,
    parse_session_cookie,
)


class TestQueryPayload:
    """Tests for the ``_r`` query encoding."""

    def test_round_trip(self) -> None:
        params = {
            "gameId": "o1y9wo6q",
            "platformId": ["w89rwelk"],
            "page": 2,
            "obsolete": False,
        }
        assert decode_query_payload(encode_query_payload(params)) == params

    def test_encoding_is_compact_base64(self) -> None:
        encoded = encode_query_payload({"gameUrl": "sm64", "page": 1})
        assert base64.b64decode(encoded) == b'{"gameUrl":"sm64","page":1}'

    def test_whitespace_is_stripped_everywhere(self) -> None:
        encoded = encode_query_payload({"query": "super mario 64"})
        assert base64.b64decode(encoded) == b'{"query":"supermario64"}'

    def test_encoding_is_idempotent_on_whitespace_free_json(self) -> None:
        params = {"a": [1, 2], "b": {"c": "d"}}
        encoded = encode_query_payload(params)
        assert encode_query_payload(decode_query_payload(encoded)) == encoded

    def test_empty_payload(self) -> None:
        assert base64.b64decode(encode_query_payload({})) == b"{}"

    def test_non_ascii_is_utf8(self) -> None:
        encoded = encode_query_payload({"name": "Pokémon"})
        assert json.loads(base64.b64decode(encoded).decode("utf-8")) == {
            "name": "Pokémon"
        }


    def test_lone_surrogate_is_replaced(self) -> None:
        encoded = encode_query_payload({"q": "a\ud800b"})
        assert decode_query_payload(encoded) == {"q": "a�b"}


class TestSessionCookie:
    """Tests for session id extraction and formatting."""

    def test_parse_session_id(self) -> None:
        cookies = ["PHPSESSID=abc123; path=/; secure; HttpOnly"]
        assert parse_session_cookie(cookies) == "abc123"

    def test_parse_without_attributes(self) -> None:
        assert parse_session_cookie(["PHPSESSID=abc123"]) == "abc123"

    def test_parse_skips_other_cookies(self) -> None:
        cookies = ["theme=dark; path=/", "PHPSESSID=xyz; path=/"]
        assert parse_session_cookie(cookies) == "xyz"

    def test_parse_comma_joined_header(self) -> None:
        cookies = ["theme=dark; path=/, PHPSESSID=xyz; path=/"]
        assert parse_session_cookie(cookies) == "xyz"

    def test_parse_missing(self) -> None:
        assert parse_session_cookie([]) is None
        assert parse_session_cookie(["theme=dark"]) is None

    def test_parse_empty_value(self) -> None:
        assert parse_session_cookie(["PHPSESSID=; expires=0"]) is None

    def test_build_session_cookie(self) -> None:
        assert build_session_cookie("abc123") == "PHPSESSID=abc123"


class TestUserAgent:
    """Tests for User-Agent composition."""

    def test_default(self) -> None:
        assert build_user_agent() == BASE_USER_AGENT

    def test_suffix(self) -> None:
        assert build_user_agent("my-bot") == f"{BASE_USER_AGENT}/my-bot"
