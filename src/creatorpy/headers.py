"""Header/cookie assembly for authenticated creator API requests.

The remote service fingerprints clients on the exact header set and the
cookie layout, so both are produced here from fixed templates.
"""

from __future__ import annotations

import re

from requests.exceptions import InvalidHeader
from requests.structures import CaseInsensitiveDict
from requests.utils import check_header_validity

from creatorpy import constants
from creatorpy.errors import InvalidHeaderName, InvalidHeaderValue

# Control characters other than horizontal tab.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def build_cookie(session: str, auth_id: str, two_factor: str | None = None) -> str:
    """Return the cookie header value in the order the web app sends it."""
    if two_factor is not None:
        return f"sess={session};auth_id={auth_id};two_factor={two_factor};"
    return f"sess={session};auth_id={auth_id};"


def _append(headers: CaseInsensitiveDict[str], name: str, value: str) -> None:
    try:
        check_header_validity((name, ""))
    except InvalidHeader as exc:
        raise InvalidHeaderName(name) from exc
    if not isinstance(value, str) or _CONTROL_CHARS.search(value):
        raise InvalidHeaderValue(name)
    headers[name] = value


def build_headers(
    user_agent: str,
    xbc: str,
    auth_id: str,
    two_factor: str | None,
    session: str,
) -> CaseInsensitiveDict[str]:
    """Build the default headers shared by every request of a client.

    Raises InvalidHeaderValue if any fragment contains bytes that cannot be
    sent in an HTTP header. The collection is only returned once every entry
    has been validated.
    """
    headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
    _append(headers, constants.APP_TOKEN_HEADER, constants.APP_TOKEN_VALUE)
    _append(headers, constants.USER_AGENT_HEADER, user_agent)
    _append(headers, constants.XBC_HEADER, xbc)
    _append(headers, constants.USER_ID_HEADER, auth_id)
    _append(
        headers,
        constants.COOKIE_HEADER,
        build_cookie(session, auth_id, two_factor),
    )
    return headers
