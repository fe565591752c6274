from __future__ import annotations

import itertools
import logging
import threading
from typing import Any

from booking_proxy.application.ports.scheduling import SchedulingPort


class MockScheduling(SchedulingPort):
    def __init__(self) -> None:
        self._bookings: dict[str, dict[str, str]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def book_service(self, form: list[tuple[str, str]]) -> dict[str, Any]:
        fields = dict(form)
        with self._lock:
            appointment_id = f"mock_appointment_{next(self._ids)}"
            self._bookings[appointment_id] = fields
        self._logger.info(
            "Mock appointment booked",
            extra={"appointment_id": appointment_id, "service_id": fields.get("ServiceId")},
        )
        return {"data": {"appointmentId": appointment_id}}

    def get_booking(self, appointment_id: str) -> dict[str, str] | None:
        return self._bookings.get(appointment_id)
