from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CachedToken:
    access_token: str
    expires_at: float  # clock seconds, same clock as the owning cache

    def is_fresh(self, now: float, margin_seconds: float) -> bool:
        return now < self.expires_at - margin_seconds
