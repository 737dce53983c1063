"""CreatorBuilder: collects credential fragments and builds a Creator client."""

from __future__ import annotations

from loguru import logger

from creatorpy.client import Creator
from creatorpy.constants import DEFAULT_IMPERSONATE
from creatorpy.errors import (
    MissingAccountId,
    MissingBrowserCheckToken,
    MissingProxy,
    MissingSession,
    MissingUserAgent,
)
from creatorpy.headers import build_headers
from creatorpy.http import create_session
from creatorpy.models import Credentials, Session
from creatorpy.signature import SignatureService


class CreatorBuilder:
    """Fluent builder for an authenticated ``Creator`` client.

    Setters only record values and return the builder; everything is
    validated in one pass by ``build`` so the first missing fragment always
    determines the error::

        creator = (
            CreatorBuilder()
            .user_agent(ua)
            .xbc(xbc)
            .auth_id(auth_id)
            .session(sess)
            .proxy("http://127.0.0.1:8080")
            .sig_svc(signer)
            .build()
        )
    """

    def __init__(self) -> None:
        self._user_agent: str | None = None
        self._xbc: str | None = None
        self._auth_id: str | None = None
        self._two_factor: str | None = None
        self._session: str | None = None
        self._proxy: str | None = None
        self._sig_svc: SignatureService | None = None
        self._impersonate: str = DEFAULT_IMPERSONATE

    @classmethod
    def from_credentials(
        cls,
        credentials: Credentials,
        sig_svc: SignatureService | None = None,
    ) -> CreatorBuilder:
        """Pre-fill a builder from a loaded ``Credentials`` model."""
        builder = cls()
        builder._user_agent = credentials.user_agent
        builder._xbc = credentials.xbc
        builder._auth_id = credentials.auth_id
        builder._two_factor = credentials.two_factor
        builder._session = credentials.session_token
        builder._proxy = credentials.proxy
        builder._sig_svc = sig_svc
        return builder

    # ── Setters ──

    def user_agent(self, user_agent: str) -> CreatorBuilder:
        self._user_agent = user_agent
        return self

    def xbc(self, xbc: str) -> CreatorBuilder:
        self._xbc = xbc
        return self

    def auth_id(self, auth_id: str) -> CreatorBuilder:
        self._auth_id = auth_id
        return self

    def two_factor(self, two_factor: str) -> CreatorBuilder:
        self._two_factor = two_factor
        return self

    def session(self, session: str) -> CreatorBuilder:
        self._session = session
        return self

    def proxy(self, proxy: str) -> CreatorBuilder:
        self._proxy = proxy
        return self

    def sig_svc(self, sig_svc: SignatureService) -> CreatorBuilder:
        self._sig_svc = sig_svc
        return self

    def impersonate(self, impersonate: str) -> CreatorBuilder:
        """Browser profile for the TLS fingerprint (curl_cffi name)."""
        self._impersonate = impersonate
        return self

    # ── Build ──

    def build(self) -> Creator:
        """Validate the collected fragments and construct the client.

        Raises a ``Missing*`` error for the first absent fragment, checked in
        the order user agent, xbc, auth id, session, proxy.
        ``InvalidHeaderValue`` means a fragment cannot be sent as a header and
        ``TransportConstructionFailed`` that the proxy or client options were
        rejected. Nothing is returned on failure.
        """
        if self._user_agent is None:
            raise MissingUserAgent()
        if self._xbc is None:
            raise MissingBrowserCheckToken()
        if self._auth_id is None:
            raise MissingAccountId()
        if self._session is None:
            raise MissingSession()
        if self._proxy is None:
            raise MissingProxy()

        default_headers = build_headers(
            self._user_agent,
            self._xbc,
            self._auth_id,
            self._two_factor,
            self._session,
        )

        client = create_session(
            headers=default_headers,
            proxy=self._proxy,
            http1_only=True,
            impersonate=self._impersonate,
        )
        try:
            internal = create_session(
                headers=default_headers, impersonate=self._impersonate
            )
        except Exception:
            client.close()
            raise

        session = Session(
            user_agent=self._user_agent,
            xbc=self._xbc,
            auth_id=self._auth_id,
            two_factor=self._two_factor,
            session_token=self._session,
        )
        logger.debug(
            "Built creator client (two_factor={}, impersonate={})",
            session.has_two_factor,
            self._impersonate,
        )
        return Creator(session, client, internal, self._sig_svc)
