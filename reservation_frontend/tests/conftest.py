import json
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from reservation_frontend.app.services.api_client import ReservationsApi
from reservation_frontend.app.services.messages import JA
from reservation_frontend.app.services.reservations import ReservationClientView


API_URL = "http://reservations.test/api/reservations"


class FakeReservationServer:
    """In-memory stand-in for the remote reservation API."""

    def __init__(self, records: list[dict] | None = None) -> None:
        self.records: list[dict] = list(records or [])
        self.requests: list[httpx.Request] = []
        self.list_response: httpx.Response | None = None
        self.create_response: httpx.Response | None = None
        self.error: httpx.HTTPError | None = None
        self.on_request: Callable[[httpx.Request], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.error is not None:
            raise self.error

        if request.method == "GET":
            if self.list_response is not None:
                return self.list_response
            return httpx.Response(200, json=self.records)

        if request.method == "POST":
            if self.create_response is not None:
                return self.create_response
            body = json.loads(request.content)
            record = {"_id": f"r{len(self.records) + 1}", **body}
            self.records.append(record)
            return httpx.Response(201, json=record)

        return httpx.Response(405)

    def count(self, method: str) -> int:
        return sum(1 for request in self.requests if request.method == method)

    def posted_bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests if request.method == "POST"]


@pytest.fixture
def server() -> FakeReservationServer:
    return FakeReservationServer()


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest_asyncio.fixture
async def api(server: FakeReservationServer) -> AsyncGenerator[ReservationsApi, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(server.handler)) as client:
        yield ReservationsApi(client, API_URL)


@pytest.fixture
def view(api: ReservationsApi) -> ReservationClientView:
    return ReservationClientView(api, catalog=JA)
