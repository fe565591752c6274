from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _as_text(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


class BookRequestSchema(BaseModel):
    client_id: str | None = None
    service: str | None = None
    datetime: str | None = None
    stylist: str | None = None
    additional_services: list[str] | None = None

    @field_validator("client_id", "service", "datetime", "stylist", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Any:
        return _as_text(v)

    @field_validator("additional_services", mode="before")
    @classmethod
    def loose_addons(cls, v: Any) -> list[str] | None:
        # Non-list values are ignored; entries that are not text are dropped
        if not isinstance(v, list):
            return None
        out: list[str] = []
        for item in v:
            item = _as_text(item)
            if isinstance(item, str):
                out.append(item)
        return out


class BookResponseSchema(BaseModel):
    success: bool
    appointment_id: str | None = None
    service_id: str | None = None
    additional_services: list[str] | None = None
    message: str | None = None
    error: str | None = None
    kind: str | None = None


class HealthResponseSchema(BaseModel):
    status: str
    service: str
    version: str
    features: list[str] = Field(default_factory=list)
    timestamp: str


class CatalogItemSchema(BaseModel):
    price: str | None = None
    meevo_id: str
    note: str | None = None
