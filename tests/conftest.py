"""Shared test fixtures for creatorpy tests."""

from __future__ import annotations

import pytest

from creatorpy.builder import CreatorBuilder

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/113.0"


class FakeSession:
    """Stand-in for curl_cffi's Session that records its construction."""

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs
        self.headers = kwargs.get("headers")
        self.proxies = kwargs.get("proxies")
        self.http_version = kwargs.get("http_version")
        self.impersonate = kwargs.get("impersonate")
        self.closed = False

    def close(self) -> None:
        self.closed = True


class StubSigner:
    def sign(self, path: str, auth_id: str) -> dict[str, str]:
        return {"sign": f"{path}:{auth_id}"}


@pytest.fixture
def fragments() -> dict[str, str]:
    return {
        "user_agent": USER_AGENT,
        "xbc": "xbc-token",
        "auth_id": "123456",
        "session": "sess-token",
        "proxy": "http://127.0.0.1:8080",
    }


@pytest.fixture
def signer() -> StubSigner:
    return StubSigner()


@pytest.fixture
def builder(fragments, signer) -> CreatorBuilder:
    """A builder with every required fragment set, no two-factor."""
    return (
        CreatorBuilder()
        .user_agent(fragments["user_agent"])
        .xbc(fragments["xbc"])
        .auth_id(fragments["auth_id"])
        .session(fragments["session"])
        .proxy(fragments["proxy"])
        .sig_svc(signer)
    )


@pytest.fixture
def fake_sessions(monkeypatch) -> list[FakeSession]:
    """Replace the HTTP engine with FakeSession and collect every instance."""
    created: list[FakeSession] = []

    def factory(**kwargs) -> FakeSession:
        session = FakeSession(**kwargs)
        created.append(session)
        return session

    monkeypatch.setattr("creatorpy.http.Session", factory)
    return created


@pytest.fixture
def fake_session_cls() -> type[FakeSession]:
    return FakeSession
