from __future__ import annotations

from abc import ABC, abstractmethod

from booking_proxy.domain.entities.service_catalog import ServiceCatalogEntry


class ServiceCatalogPort(ABC):
    @abstractmethod
    def lookup_id(self, alias: str) -> str | None:
        """Get canonical service id for an alias (case-insensitive, trimmed)."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_key: str) -> ServiceCatalogEntry | None:
        """Get service catalog entry by any of its aliases."""
        raise NotImplementedError

    @abstractmethod
    def list_entries(self, category: str | None = None) -> list[ServiceCatalogEntry]:
        """List catalog entries, optionally filtered by category."""
        raise NotImplementedError

    @abstractmethod
    def alias_table(self) -> dict[str, str]:
        """Normalized alias -> canonical service id, for operator display."""
        raise NotImplementedError
