from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BookingRequest:
    client_id: str | None = None
    service: str | None = None
    datetime: str | None = None
    stylist: str | None = None
    additional_services: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BookingResult:
    success: bool
    appointment_id: str | None = None
    service_id: str | None = None
    additional_services: list[str] | None = None
    message: str | None = None
    error: str | None = None
    kind: str | None = None  # "validation", "auth", "upstream"; failures only
