"""Tests for creatorpy.headers: header set and cookie layout."""

from __future__ import annotations

import pytest

from creatorpy import constants
from creatorpy.errors import InvalidHeaderName, InvalidHeaderValue
from creatorpy.headers import build_cookie, build_headers

UA = "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/113.0"


# ── Cookie ──


class TestBuildCookie:
    def test_without_two_factor(self):
        assert build_cookie("s1", "a1") == "sess=s1;auth_id=a1;"

    def test_with_two_factor(self):
        assert build_cookie("s1", "a1", "tf") == "sess=s1;auth_id=a1;two_factor=tf;"

    def test_empty_two_factor_still_uses_two_factor_template(self):
        assert build_cookie("s1", "a1", "") == "sess=s1;auth_id=a1;two_factor=;"


# ── Header set ──


class TestBuildHeaders:
    def test_contains_exactly_expected_headers(self):
        headers = build_headers(UA, "xbc1", "acct1", None, "sess1")
        assert list(headers.keys()) == [
            constants.APP_TOKEN_HEADER,
            constants.USER_AGENT_HEADER,
            constants.XBC_HEADER,
            constants.USER_ID_HEADER,
            constants.COOKIE_HEADER,
        ]
        assert headers["app-token"] == constants.APP_TOKEN_VALUE
        assert headers["user-agent"] == UA
        assert headers["x-bc"] == "xbc1"
        assert headers["user-id"] == "acct1"
        assert headers["cookie"] == "sess=sess1;auth_id=acct1;"

    def test_two_factor_cookie(self):
        headers = build_headers(UA, "xbc1", "acct1", "tf1", "sess1")
        assert headers["Cookie"] == "sess=sess1;auth_id=acct1;two_factor=tf1;"
        assert len(headers) == 5

    def test_lookup_is_case_insensitive(self):
        headers = build_headers(UA, "xbc1", "acct1", None, "sess1")
        assert headers["X-BC"] == headers["x-bc"]

    def test_equal_inputs_give_equal_collections(self):
        first = build_headers(UA, "xbc1", "acct1", "tf1", "sess1")
        second = build_headers(UA, "xbc1", "acct1", "tf1", "sess1")
        assert first == second
        assert first["Cookie"] == second["Cookie"]

    def test_different_inputs_differ(self):
        first = build_headers(UA, "xbc1", "acct1", None, "sess1")
        second = build_headers(UA, "xbc1", "acct1", "tf1", "sess1")
        assert first != second


# ── Validation ──


class TestHeaderValidation:
    @pytest.mark.parametrize(
        ("kwargs", "header"),
        [
            ({"user_agent": "UA\n/1"}, "User-Agent"),
            ({"xbc": "xbc\r1"}, "x-bc"),
            ({"auth_id": "acct\x001"}, "user-id"),
            ({"session": "sess\x7f"}, "Cookie"),
            ({"two_factor": "tf\n"}, "Cookie"),
        ],
    )
    def test_control_characters_rejected(self, kwargs, header):
        args = {
            "user_agent": UA,
            "xbc": "xbc1",
            "auth_id": "acct1",
            "two_factor": None,
            "session": "sess1",
        }
        args.update(kwargs)
        with pytest.raises(InvalidHeaderValue) as exc_info:
            build_headers(**args)
        assert exc_info.value.header_name == header

    def test_error_does_not_echo_value(self):
        with pytest.raises(InvalidHeaderValue) as exc_info:
            build_headers(UA, "secret\nvalue", "acct1", None, "sess1")
        assert "secret" not in str(exc_info.value)

    def test_leading_whitespace_accepted(self):
        headers = build_headers(" UA/1", "xbc1", "acct1", None, "sess1")
        assert headers["User-Agent"] == " UA/1"

    def test_tab_accepted(self):
        headers = build_headers("UA\t1", "xbc1", "acct1", None, "sess1")
        assert headers["User-Agent"] == "UA\t1"

    def test_malformed_constant_name(self, monkeypatch):
        monkeypatch.setattr(constants, "XBC_HEADER", "x:bc")
        with pytest.raises(InvalidHeaderName) as exc_info:
            build_headers(UA, "xbc1", "acct1", None, "sess1")
        assert exc_info.value.header_name == "x:bc"
