class BookingError(RuntimeError):
    """Base for failures reported to callers as a failed booking."""

    kind = "error"


class BookingValidationError(BookingError):
    """Raised when a request is rejected before any upstream call."""

    kind = "validation"


class AuthError(BookingError):
    """Raised when the client-credentials exchange fails (rejection, timeout, bad payload)."""

    kind = "auth"


class UpstreamError(BookingError):
    """Raised when the booking call is rejected or the transport fails."""

    kind = "upstream"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
