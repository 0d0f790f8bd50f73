"""Errors raised by the reservation API client and handled by the view."""


class ReservationClientError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ReservationClientError):
    """A required draft field is empty; raised before any request is made."""


class TransportError(ReservationClientError):
    """The API answered with a status outside 2xx."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(message or f"HTTP error! status: {status_code}")


class MalformedResponseError(ReservationClientError):
    """The list body is not a sequence of reservation objects."""


class NetworkError(ReservationClientError):
    """Connection, timeout or body-decoding failure below the HTTP layer."""
