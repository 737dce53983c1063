"""Exception hierarchy for building creator clients."""

from __future__ import annotations


class CreatorpyError(Exception):
    """Base class for all creatorpy errors."""


class CreatorBuilderError(CreatorpyError):
    """Raised when ``CreatorBuilder.build`` cannot produce a client."""


# ── Missing credential fragments ──


class MissingFieldError(CreatorBuilderError):
    """A required credential fragment was never set before ``build``."""

    field = ""
    message = "Missing field"

    def __init__(self) -> None:
        super().__init__(self.message)


class MissingUserAgent(MissingFieldError):
    field = "user_agent"
    message = "Missing User Agent"


class MissingBrowserCheckToken(MissingFieldError):
    field = "xbc"
    message = "Missing XBC"


class MissingAccountId(MissingFieldError):
    field = "auth_id"
    message = "Missing AuthID"


class MissingSession(MissingFieldError):
    field = "session"
    message = "Missing Session"


class MissingProxy(MissingFieldError):
    field = "proxy"
    message = "Missing Proxy"


# ── Header encoding ──


class InvalidHeaderName(CreatorBuilderError):
    """A header name cannot be sent over HTTP."""

    def __init__(self, header_name: str) -> None:
        self.header_name = header_name
        super().__init__(f"Invalid header name: {header_name!r}")


class InvalidHeaderValue(CreatorBuilderError):
    """A header value contains bytes that are illegal in HTTP headers.

    The offending value is credential material, so only the header name is
    kept on the exception.
    """

    def __init__(self, header_name: str) -> None:
        self.header_name = header_name
        super().__init__(f"Invalid value for header {header_name!r}")


# ── Transport ──


class TransportConstructionFailed(CreatorBuilderError):
    """The HTTP engine rejected the proxy address or client options."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to construct HTTP transport: {reason}")


# ── Configuration ──


class CredentialsError(CreatorpyError):
    """Raised when a credentials file or environment cannot be loaded."""
