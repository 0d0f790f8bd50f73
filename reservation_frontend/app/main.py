from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from reservation_frontend.app.core.config import settings
from reservation_frontend.app.core.http_client import close_http_client, init_http_client
from reservation_frontend.app.core.logger_config import configure_logging
import reservation_frontend.app.routers.health as health
import reservation_frontend.app.routers.page as page
import reservation_frontend.app.routers.reservations as reservations


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await init_http_client()
    try:
        yield
    finally:
        await close_http_client()


app = FastAPI(
    title="Reservation Frontend",
    lifespan=lifespan,
)

app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(reservations.router, prefix=settings.API_PREFIX)
app.include_router(page.router)


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
