from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from booking_proxy.api.schemas import BookRequestSchema, BookResponseSchema, CatalogItemSchema, HealthResponseSchema
from booking_proxy.application.ports.service_catalog import ServiceCatalogPort
from booking_proxy.application.use_cases.booking import BookingUseCase
from booking_proxy.domain.entities.booking import BookingRequest
from booking_proxy.wiring.dependencies import get_booking_use_case, get_service_catalog

router = APIRouter()
logger = logging.getLogger(__name__)

SERVICE_NAME = "Book Appointment"
SERVICE_VERSION = "2.0.0"
FEATURES = ["single_service", "additional_services", "service_name_resolution"]

USAGE_EXAMPLES = {
    "haircut_standard_only": {"service": "haircut_standard", "additional_services": []},
    "haircut_skin_fade_with_wash_and_grooming": {
        "service": "haircut_skin_fade",
        "additional_services": ["wash", "grooming"],
    },
    "long_locks_with_wash": {"service": "long_locks", "additional_services": ["wash"]},
}

BOOKING_RULES = {
    "rule_1": "Choose ONE primary service (haircut_standard, haircut_skin_fade, or long_locks)",
    "rule_2": "Wash and Grooming are optional add-ons for any primary service",
    "rule_3": "You cannot book just Wash or Grooming alone - they require a primary service",
}


@router.post("/book", response_model=BookResponseSchema, response_model_exclude_none=True)
def book(
    req: BookRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
) -> BookResponseSchema:
    logger.info("Booking request received", extra={"client_id": req.client_id, "service": req.service})
    result = uc.book(
        BookingRequest(
            client_id=req.client_id,
            service=req.service,
            datetime=req.datetime,
            stylist=req.stylist,
            additional_services=list(req.additional_services or []),
        )
    )
    return BookResponseSchema(
        success=result.success,
        appointment_id=result.appointment_id,
        service_id=result.service_id,
        additional_services=result.additional_services,
        message=result.message,
        error=result.error,
        kind=result.kind,
    )


@router.get("/health", response_model=HealthResponseSchema)
def health() -> HealthResponseSchema:
    return HealthResponseSchema(
        status="ok",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        features=FEATURES,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/services")
def services(catalog: ServiceCatalogPort = Depends(get_service_catalog)) -> dict[str, object]:
    def _items(category: str) -> dict[str, dict]:
        return {
            entry.service_key: CatalogItemSchema(
                price=entry.price, meevo_id=entry.service_id, note=entry.notes
            ).model_dump(exclude_none=True)
            for entry in catalog.list_entries(category)
        }

    return {
        "keep_it_cut_services": {
            "primary": _items("primary"),
            "addons": _items("addon"),
            "legacy": _items("legacy"),
        },
        "aliases": catalog.alias_table(),
        "usage_examples": USAGE_EXAMPLES,
        "booking_rules": BOOKING_RULES,
    }
