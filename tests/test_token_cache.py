"""
Tests for the Meevo client-credentials token cache.
"""

from __future__ import annotations

import json
import threading
import time

import httpx
import pytest

from booking_proxy.application.exceptions import AuthError
from booking_proxy.infrastructure.meevo.token_cache import MeevoTokenCache

AUTH_URL = "https://auth.example.test/oauth2/token"


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TokenServer:
    def __init__(self, expires_in: int = 3600, delay: float = 0.0) -> None:
        self.calls: list[dict] = []
        self.expires_in = expires_in
        self.delay = delay
        self._lock = threading.Lock()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.calls.append(json.loads(request.content))
            n = len(self.calls)
        return httpx.Response(200, json={"access_token": f"token-{n}", "expires_in": self.expires_in})


def make_cache(handler, clock=None, margin=300) -> MeevoTokenCache:
    return MeevoTokenCache(
        auth_url=AUTH_URL,
        client_id="client-abc",
        client_secret="secret-xyz",
        safety_margin_seconds=margin,
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        clock=clock or FakeClock(),
    )


def test_sends_client_credentials():
    server = TokenServer()
    cache = make_cache(server)

    assert cache.get_token() == "token-1"
    assert server.calls == [{"client_id": "client-abc", "client_secret": "secret-xyz"}]


def test_reuses_token_within_margin():
    server = TokenServer(expires_in=3600)
    clock = FakeClock()
    cache = make_cache(server, clock=clock)

    first = cache.get_token()
    clock.now = 3299
    second = cache.get_token()

    assert first == second == "token-1"
    assert len(server.calls) == 1


def test_refreshes_once_inside_margin():
    server = TokenServer(expires_in=3600)
    clock = FakeClock()
    cache = make_cache(server, clock=clock)

    cache.get_token()
    clock.now = 3300
    assert cache.get_token() == "token-2"
    assert cache.get_token() == "token-2"
    assert len(server.calls) == 2


def test_short_lived_token_is_never_reused():
    server = TokenServer(expires_in=120)
    cache = make_cache(server)

    assert cache.get_token() == "token-1"
    assert cache.get_token() == "token-2"


def test_invalidate_forces_exchange():
    server = TokenServer()
    cache = make_cache(server)

    cache.get_token()
    cache.invalidate()
    assert cache.get_token() == "token-2"


def test_concurrent_callers_share_one_exchange():
    server = TokenServer(delay=0.05)
    cache = make_cache(server, clock=time.monotonic)
    barrier = threading.Barrier(8)
    tokens: list[str] = []

    def worker():
        barrier.wait()
        tokens.append(cache.get_token())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(server.calls) == 1
    assert tokens == ["token-1"] * 8


def test_rejection_raises_auth_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "invalid_client", "error_description": "Bad credentials"})

    cache = make_cache(handler)
    with pytest.raises(AuthError, match="Bad credentials"):
        cache.get_token()


def test_missing_access_token_raises_auth_error():
    cache = make_cache(lambda request: httpx.Response(200, json={"expires_in": 3600}))
    with pytest.raises(AuthError):
        cache.get_token()


def test_transport_failure_raises_auth_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    cache = make_cache(handler)
    with pytest.raises(AuthError, match="timed out"):
        cache.get_token()


def test_failed_refresh_keeps_no_token():
    responses = [httpx.Response(500, text="boom"), httpx.Response(200, json={"access_token": "ok", "expires_in": 3600})]
    cache = make_cache(lambda request: responses.pop(0))

    with pytest.raises(AuthError):
        cache.get_token()
    assert cache.get_token() == "ok"


def test_requires_credentials():
    with pytest.raises(ValueError):
        MeevoTokenCache(auth_url=AUTH_URL, client_id="", client_secret="", client=httpx.Client())
