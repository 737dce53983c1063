"""HTTP session factory: uses curl_cffi for browser TLS fingerprinting."""

from __future__ import annotations

from collections.abc import Mapping

from curl_cffi import CurlError, CurlHttpVersion
from curl_cffi.requests import Session
from loguru import logger
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from creatorpy.constants import DEFAULT_IMPERSONATE, SUPPORTED_PROXY_SCHEMES
from creatorpy.errors import TransportConstructionFailed

HttpSession = Session
"""Type alias for the HTTP session used throughout the package."""


def parse_proxy(proxy: str) -> str:
    """Validate a proxy address and return it as a normalised URL.

    A bare ``host:port`` is treated as an HTTP proxy.
    """
    candidate = proxy.strip()
    if "://" not in candidate:
        candidate = f"http://{candidate}"
    try:
        url = parse_url(candidate)
    except LocationParseError as exc:
        raise TransportConstructionFailed(
            f"malformed proxy address {redact_proxy(proxy)!r}"
        ) from exc

    scheme = (url.scheme or "").lower()
    if scheme not in SUPPORTED_PROXY_SCHEMES:
        raise TransportConstructionFailed(f"unsupported proxy scheme {scheme!r}")
    if not url.host:
        raise TransportConstructionFailed(
            f"proxy address {redact_proxy(proxy)!r} has no host"
        )
    if url.path not in (None, "", "/") or url.query or url.fragment:
        raise TransportConstructionFailed(
            f"proxy address {redact_proxy(proxy)!r} must not have a path"
        )
    return url._replace(scheme=scheme, path=None).url


def redact_proxy(proxy: str) -> str:
    """Hide proxy credentials so the address can be logged."""
    scheme, sep, rest = proxy.rpartition("://")
    if "@" not in rest:
        return proxy
    host = rest.rsplit("@", 1)[1]
    return f"{scheme}{sep}***@{host}"


def create_session(
    *,
    headers: Mapping[str, str],
    proxy: str | None = None,
    http1_only: bool = False,
    impersonate: str = DEFAULT_IMPERSONATE,
) -> HttpSession:
    """Create an HTTP session that impersonates a real browser's TLS fingerprint.

    The session gets its own copy of ``headers``. curl_cffi's impersonation
    headers are disabled so the header set on the wire is exactly ``headers``.
    """
    proxies = None
    if proxy is not None:
        proxy_url = parse_proxy(proxy)
        proxies = {"http": proxy_url, "https": proxy_url}

    logger.debug(
        "Creating HTTP session (impersonate={}, proxy={}, http1_only={})",
        impersonate,
        redact_proxy(proxies["https"]) if proxies else None,
        http1_only,
    )
    try:
        return Session(
            headers=dict(headers),
            proxies=proxies,
            impersonate=impersonate,
            default_headers=False,
            http_version=CurlHttpVersion.V1_1 if http1_only else None,
        )
    except (CurlError, ValueError, TypeError) as exc:
        raise TransportConstructionFailed(str(exc)) from exc
