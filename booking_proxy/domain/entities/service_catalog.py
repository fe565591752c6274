from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceCatalogEntry:
    service_key: str
    service_id: str
    display_name: str
    category: str  # "primary", "addon", "legacy"
    aliases: frozenset[str] = frozenset()
    price: str | None = None
    notes: str | None = None

    def all_aliases(self) -> frozenset[str]:
        return frozenset({self.service_key, *self.aliases})
