import json

import httpx
from loguru import logger
from pydantic import ValidationError as SchemaValidationError

from reservation_frontend.app.core.exceptions import MalformedResponseError, NetworkError, TransportError
from reservation_frontend.app.services.models import Reservation, ReservationCreateIn


INVALID_FORMAT_MESSAGE = "Received invalid data format from server."


def resolve_error_message(response: httpx.Response) -> str:
    """Best available failure detail for a non-2xx response.

    Prefers the server's ``message`` field, then the JSON body itself, then a
    generic status line when the body is empty or not JSON.
    """
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return fallback
    if data is None:
        return fallback
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


class ReservationsApi:
    """Thin async client for the reservation collection endpoint."""

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self._url = url

    async def list_reservations(self) -> list[Reservation]:
        try:
            response = await self._client.get(self._url)
        except httpx.HTTPError as exc:
            raise NetworkError(_describe(exc)) from exc

        if not response.is_success:
            raise TransportError(response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise NetworkError(f"invalid JSON in response body: {exc}") from exc

        if not isinstance(data, list):
            logger.error("API did not return an array: {!r}", data)
            raise MalformedResponseError(INVALID_FORMAT_MESSAGE)

        try:
            return [Reservation.model_validate(item) for item in data]
        except SchemaValidationError as exc:
            logger.error("API returned an unexpected reservation shape: {}", exc)
            raise MalformedResponseError(INVALID_FORMAT_MESSAGE) from exc

    async def create_reservation(self, *, name: str, datetime: str) -> None:
        """POST a new reservation; the response body is not used."""
        payload = ReservationCreateIn(name=name, datetime=datetime)
        try:
            response = await self._client.post(self._url, json=payload.model_dump())
        except httpx.HTTPError as exc:
            raise NetworkError(_describe(exc)) from exc

        if not response.is_success:
            raise TransportError(response.status_code, resolve_error_message(response))


def _describe(exc: httpx.HTTPError) -> str:
    return str(exc) or exc.__class__.__name__
