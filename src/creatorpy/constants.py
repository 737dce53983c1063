"""Static header identity and transport defaults for the creator API."""

from __future__ import annotations

APP_TOKEN_HEADER = "app-token"
APP_TOKEN_VALUE = "33d57ade8c02dbc5a333db99ff9ae26a"

XBC_HEADER = "x-bc"
USER_ID_HEADER = "user-id"
USER_AGENT_HEADER = "User-Agent"
COOKIE_HEADER = "Cookie"

DEFAULT_IMPERSONATE = "chrome"
"""curl_cffi browser profile used for the TLS fingerprint of both transports."""

SUPPORTED_PROXY_SCHEMES = frozenset(
    {"http", "https", "socks4", "socks4a", "socks5", "socks5h"}
)
