from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SchedulingPort(ABC):
    @abstractmethod
    def book_service(self, form: list[tuple[str, str]]) -> dict[str, Any]:
        """
        Submit a form-encoded booking and return the decoded upstream payload.

        Args:
            form: Ordered (field, value) pairs, e.g. ServiceId, StartTime, ClientId.

        Returns:
            The upstream JSON body (empty dict when the body is not JSON).

        Raises:
            AuthError: the bearer token could not be obtained
            UpstreamError: non-2xx response, timeout or network failure
        """
        raise NotImplementedError
