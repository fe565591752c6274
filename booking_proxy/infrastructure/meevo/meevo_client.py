from __future__ import annotations

import logging
from typing import Any

import httpx

from booking_proxy.application.exceptions import UpstreamError
from booking_proxy.application.ports.scheduling import SchedulingPort
from booking_proxy.application.ports.token_provider import TokenProviderPort
from booking_proxy.core.config import settings


class MeevoSchedulingClient(SchedulingPort):
    def __init__(
        self,
        token_provider: TokenProviderPort,
        api_url: str | None = None,
        tenant_id: str | None = None,
        location_id: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._tokens = token_provider
        self._api_url = (api_url or settings.MEEVO_API_URL).rstrip("/")
        self._tenant_id = tenant_id or settings.MEEVO_TENANT_ID
        self._location_id = location_id or settings.MEEVO_LOCATION_ID
        self._client = client or httpx.Client(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    def book_service(self, form: list[tuple[str, str]]) -> dict[str, Any]:
        # AuthError from the token provider propagates as-is
        token = self._tokens.get_token()

        url = f"{self._api_url}/book/service"
        params = {"TenantId": self._tenant_id, "LocationId": self._location_id}
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        try:
            response = self._client.post(url, params=params, data=dict(form), headers=headers)
        except httpx.TimeoutException as e:
            self._logger.error("Meevo booking timed out", extra={"error": str(e)})
            raise UpstreamError(f"Booking request timed out: {e}") from e
        except httpx.RequestError as e:
            self._logger.error("Meevo booking transport error", extra={"error": str(e)})
            raise UpstreamError(str(e) or type(e).__name__) from e

        if response.status_code >= 400:
            message = _upstream_error_message(response)
            self._logger.error(
                "Meevo booking rejected",
                extra={"status": response.status_code, "error": response.text[:500]},
            )
            raise UpstreamError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            self._logger.warning("Meevo booking returned a non-JSON body", extra={"status": response.status_code})
            return {}
        return data if isinstance(data, dict) else {}


def _upstream_error_message(response: httpx.Response) -> str:
    """Prefer Meevo's structured `error.message`, else the HTTP status line."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    reason = response.reason_phrase or "Error"
    return f"Request failed with status code {response.status_code} ({reason})"
