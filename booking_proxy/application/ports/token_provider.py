from __future__ import annotations

from abc import ABC, abstractmethod


class TokenProviderPort(ABC):
    @abstractmethod
    def get_token(self) -> str:
        """Return a bearer token valid for at least the safety margin. Raises AuthError."""
        raise NotImplementedError
