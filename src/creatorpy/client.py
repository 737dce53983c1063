"""Creator: the authenticated client handle returned by ``CreatorBuilder``."""

from __future__ import annotations

from types import TracebackType

from creatorpy.http import HttpSession
from creatorpy.models import Session
from creatorpy.signature import SignatureService


class Creator:
    """Bundles a validated session with its two HTTP transports.

    ``client`` routes through the configured proxy and speaks HTTP/1.1 only;
    ``internal`` connects directly. Both carry the same default headers.
    """

    def __init__(
        self,
        session: Session,
        client: HttpSession,
        internal: HttpSession,
        sig_svc: SignatureService | None = None,
    ) -> None:
        self._session = session
        self._client = client
        self._internal = internal
        self._sig_svc = sig_svc

    @property
    def session(self) -> Session:
        return self._session

    @property
    def client(self) -> HttpSession:
        """Proxied transport."""
        return self._client

    @property
    def internal(self) -> HttpSession:
        """Direct transport."""
        return self._internal

    @property
    def sig_svc(self) -> SignatureService | None:
        return self._sig_svc

    def close(self) -> None:
        """Close both transports."""
        try:
            self._client.close()
        finally:
            self._internal.close()

    def __enter__(self) -> Creator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Creator(auth_id={self._session.auth_id!r})"
