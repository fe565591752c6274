from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

import httpx

from booking_proxy.application.exceptions import AuthError
from booking_proxy.application.ports.token_provider import TokenProviderPort
from booking_proxy.core.config import settings
from booking_proxy.domain.entities.token import CachedToken

DEFAULT_EXPIRES_IN_SECONDS = 3600


class MeevoTokenCache(TokenProviderPort):
    """
    Client-credentials token cache for the Meevo marketplace auth endpoint.

    Holds one token. A token is handed out only while it has more than
    `safety_margin_seconds` left; otherwise the caller refreshes it. Refreshes
    run under a lock and re-check the cache once the lock is held, so callers
    that queue up behind an in-flight exchange reuse its result.
    """

    def __init__(
        self,
        auth_url: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        safety_margin_seconds: float | None = None,
        client: httpx.Client | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._auth_url = auth_url or settings.MEEVO_AUTH_URL
        self._client_id = client_id or settings.MEEVO_CLIENT_ID
        self._client_secret = client_secret or settings.MEEVO_CLIENT_SECRET
        self._margin = (
            safety_margin_seconds if safety_margin_seconds is not None else settings.TOKEN_SAFETY_MARGIN_SECONDS
        )
        self._client = client or httpx.Client(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._clock = clock
        self._lock = threading.Lock()
        self._token: CachedToken | None = None
        self._logger = logging.getLogger(__name__)

        if not self._client_id or not self._client_secret:
            raise ValueError("MEEVO_CLIENT_ID and MEEVO_CLIENT_SECRET are required for Meevo auth")

    def get_token(self) -> str:
        token = self._token
        if token is not None and token.is_fresh(self._clock(), self._margin):
            return token.access_token

        with self._lock:
            token = self._token
            if token is not None and token.is_fresh(self._clock(), self._margin):
                return token.access_token
            self._token = self._exchange()
            return self._token.access_token

    def invalidate(self) -> None:
        with self._lock:
            self._token = None

    def _exchange(self) -> CachedToken:
        self._logger.info("Requesting fresh Meevo OAuth2 token")
        payload = {"client_id": self._client_id, "client_secret": self._client_secret}
        try:
            response = self._client.post(self._auth_url, json=payload)
        except httpx.TimeoutException as e:
            self._logger.error("Token exchange timed out", extra={"error": str(e)})
            raise AuthError(f"Token exchange timed out: {e}") from e
        except httpx.RequestError as e:
            self._logger.error("Token exchange failed", extra={"error": str(e)})
            raise AuthError(f"Token exchange failed: {e}") from e

        if response.status_code >= 400:
            message = _auth_error_message(response)
            self._logger.error(
                "Token exchange rejected",
                extra={"status": response.status_code, "error": message},
            )
            raise AuthError(f"Token exchange failed: {message}")

        try:
            data = response.json()
        except ValueError as e:
            raise AuthError("Token exchange returned a non-JSON body") from e

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise AuthError("Token exchange response has no access_token")

        expires_in = data.get("expires_in")
        try:
            lifetime = float(expires_in) if expires_in is not None else DEFAULT_EXPIRES_IN_SECONDS
        except (TypeError, ValueError) as e:
            raise AuthError(f"Token exchange returned invalid expires_in: {expires_in!r}") from e

        self._logger.info("Meevo token obtained", extra={"expires_in": lifetime})
        return CachedToken(access_token=str(access_token), expires_at=self._clock() + lifetime)


def _auth_error_message(response: httpx.Response) -> str:
    fallback = f"HTTP {response.status_code}"
    try:
        data: Any = response.json()
    except ValueError:
        return response.text.strip() or fallback
    if not isinstance(data, dict):
        return fallback
    error = data.get("error")
    if isinstance(error, dict):
        return str(error.get("message") or fallback)
    return str(data.get("error_description") or error or data.get("message") or fallback)
