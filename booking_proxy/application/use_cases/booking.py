from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from booking_proxy.application.exceptions import BookingError, BookingValidationError
from booking_proxy.application.ports.scheduling import SchedulingPort
from booking_proxy.application.utils.service_resolver import ServiceIdResolver
from booking_proxy.core.config import settings
from booking_proxy.domain.entities.booking import BookingRequest, BookingResult

MISSING_FIELDS_ERROR = "Missing required fields: client_id, service, and datetime are required"
MESSAGE_BOOKED = "Appointment booked successfully"
MESSAGE_BOOKED_WITH_ADDONS = "Appointment booked successfully with add-on services"

def parse_start_time(value: str) -> datetime:
    """Parse an ISO-8601 start time. Raises BookingValidationError if it has no UTC offset."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise BookingValidationError(_invalid_datetime(value)) from e
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise BookingValidationError(_invalid_datetime(value))
    return parsed


def _invalid_datetime(value: str) -> str:
    return (
        f'Invalid datetime: "{value}". Use ISO-8601 with a timezone offset, '
        f'e.g. "2025-12-19T10:00:00-08:00"'
    )


def extract_appointment_id(payload: dict[str, Any]) -> str | None:
    """Meevo returns the id either under a `data` wrapper or at the top level."""
    data = payload.get("data")
    if isinstance(data, dict) and data.get("appointmentId"):
        return str(data["appointmentId"])
    if payload.get("appointmentId"):
        return str(payload["appointmentId"])
    return None


class BookingUseCase:
    def __init__(
        self,
        scheduling: SchedulingPort,
        resolver: ServiceIdResolver,
        client_gender: str | None = None,
    ) -> None:
        self._scheduling = scheduling
        self._resolver = resolver
        self._client_gender = client_gender or settings.CLIENT_GENDER
        self._logger = logging.getLogger(__name__)

    def book(self, request: BookingRequest) -> BookingResult:
        try:
            service_id, start_time, addon_ids = self._validate(request)
            form = self.build_form(request, service_id, start_time, addon_ids)
            self._logger.info(
                "Submitting booking",
                extra={"client_id": request.client_id, "service_id": service_id, "addons": ",".join(addon_ids)},
            )
            payload = self._scheduling.book_service(form)
        except BookingError as e:
            self._logger.warning(
                "Booking failed",
                extra={"client_id": request.client_id, "kind": e.kind, "error": str(e)},
            )
            return BookingResult(success=False, error=str(e), kind=e.kind)

        appointment_id = extract_appointment_id(payload)
        if appointment_id is None:
            self._logger.warning("Booking accepted without an appointment id", extra={"service_id": service_id})
        else:
            self._logger.info(
                "Booking successful",
                extra={"appointment_id": appointment_id, "service_id": service_id},
            )

        requested_addons = list(request.additional_services or [])
        return BookingResult(
            success=True,
            appointment_id=appointment_id,
            service_id=service_id,
            additional_services=requested_addons,
            message=MESSAGE_BOOKED_WITH_ADDONS if requested_addons else MESSAGE_BOOKED,
        )

    def _validate(self, request: BookingRequest) -> tuple[str, str, list[str]]:
        if not _present(request.client_id) or not _present(request.service) or not _present(request.datetime):
            raise BookingValidationError(MISSING_FIELDS_ERROR)

        service_id = self._resolver.resolve(request.service)
        if service_id is None:
            raise BookingValidationError(
                f'Invalid service: "{request.service}". '
                f'Use a valid service UUID or name like "mens_haircut", "wash", etc.'
            )

        start_time = request.datetime.strip()
        parse_start_time(start_time)

        # Unknown add-ons are dropped; the primary booking still goes through
        addon_ids, dropped = self._resolver.resolve_many(request.additional_services)
        if dropped:
            self._logger.warning("Dropping unresolved add-on services", extra={"addons": ",".join(dropped)})

        return service_id, start_time, addon_ids

    def build_form(
        self,
        request: BookingRequest,
        service_id: str,
        start_time: str,
        addon_ids: list[str],
    ) -> list[tuple[str, str]]:
        form = [
            ("ServiceId", service_id),
            ("StartTime", start_time),
            ("ClientId", request.client_id),
            ("ClientGender", self._client_gender),
        ]
        if _present(request.stylist):
            form.append(("EmployeeId", request.stylist))
        if addon_ids:
            form.append(("AdditionalServiceIds", ",".join(addon_ids)))
        return form


def _present(value: str | None) -> bool:
    return value is not None and bool(value.strip())
