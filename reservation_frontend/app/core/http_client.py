import httpx
from fastapi import HTTPException, status

from reservation_frontend.app.core.config import settings
from reservation_frontend.app.services.api_client import ReservationsApi


http_client: httpx.AsyncClient | None = None


async def init_http_client() -> None:
    """Initialise the shared HTTP client used to reach the reservation API."""
    global http_client
    http_client = httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT,
        headers={"Accept": "application/json"},
    )


async def close_http_client() -> None:
    """Close the HTTP client if it was initialised."""
    global http_client
    if http_client is not None:
        await http_client.aclose()
        http_client = None


def get_reservations_api() -> ReservationsApi:
    """Provide an API client bound to the shared HTTP client."""
    if http_client is None:
        raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, detail="HTTP client unavailable")
    return ReservationsApi(http_client, settings.RESERVATIONS_API_URL)
