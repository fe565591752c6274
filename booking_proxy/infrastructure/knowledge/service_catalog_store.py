from __future__ import annotations

from collections.abc import Iterable

from booking_proxy.application.ports.service_catalog import ServiceCatalogPort
from booking_proxy.domain.entities.service_catalog import ServiceCatalogEntry
from booking_proxy.infrastructure.knowledge.service_catalog_data import SERVICE_CATALOG


def _normalize(alias: str) -> str:
    return alias.lower().strip()


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: Iterable[ServiceCatalogEntry] | None = None) -> None:
        self._entries = tuple(catalog if catalog is not None else SERVICE_CATALOG)
        self._by_alias: dict[str, ServiceCatalogEntry] = {}
        for entry in self._entries:
            for alias in entry.all_aliases():
                key = _normalize(alias)
                existing = self._by_alias.get(key)
                if existing is not None and existing is not entry:
                    raise ValueError(
                        f"Alias {key!r} is declared by both {existing.service_key!r} and {entry.service_key!r}"
                    )
                self._by_alias[key] = entry

    def lookup_id(self, alias: str) -> str | None:
        entry = self.get_service(alias)
        return entry.service_id if entry else None

    def get_service(self, service_key: str) -> ServiceCatalogEntry | None:
        return self._by_alias.get(_normalize(service_key))

    def list_entries(self, category: str | None = None) -> list[ServiceCatalogEntry]:
        if category is None:
            return list(self._entries)
        return [e for e in self._entries if e.category == category]

    def alias_table(self) -> dict[str, str]:
        return {alias: entry.service_id for alias, entry in self._by_alias.items()}
