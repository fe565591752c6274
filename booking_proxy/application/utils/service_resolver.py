from __future__ import annotations

import re

from booking_proxy.application.ports.service_catalog import ServiceCatalogPort

_UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")

# Lenient canonical check: anything with a dash longer than this is passed through
CANONICAL_MIN_LENGTH = 30


def looks_canonical(value: str) -> bool:
    return "-" in value and len(value) > CANONICAL_MIN_LENGTH


def is_uuid(value: str) -> bool:
    return bool(_UUID_RE.match(value))


class ServiceIdResolver:
    """
    Resolves a service reference (alias or canonical id) to a canonical id.

    In lenient mode, inputs that merely look like ids are passed through
    unchanged, so a very long alias containing a dash would be treated as an id.
    Strict mode only passes through well-formed UUIDs and sends everything
    else to the alias table.
    """

    def __init__(self, catalog: ServiceCatalogPort, strict: bool = False) -> None:
        self._catalog = catalog
        self._strict = strict

    def is_canonical(self, value: str) -> bool:
        if self._strict:
            return is_uuid(value)
        return looks_canonical(value)

    def resolve(self, raw: str | None) -> str | None:
        if raw is None:
            return None
        value = raw.strip()
        if not value:
            return None
        if self.is_canonical(value):
            return value
        return self._catalog.lookup_id(value)

    def resolve_many(self, raws: list[str] | None) -> tuple[list[str], list[str]]:
        """Resolve each entry independently. Returns (resolved_ids, unresolved_inputs)."""
        resolved: list[str] = []
        unresolved: list[str] = []
        for raw in raws or []:
            service_id = self.resolve(raw)
            if service_id is None:
                unresolved.append(raw)
            else:
                resolved.append(service_id)
        return resolved, unresolved
