from fastapi import APIRouter, HTTPException

from reservation_frontend.app.core import http_client as http_client_module


router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, bool]:
    """Basic liveness probe."""
    return {"ok": True}


@router.get("/readiness")
async def readiness() -> dict[str, bool]:
    """Ensure the outbound HTTP client has been initialised."""
    if http_client_module.http_client is None or http_client_module.http_client.is_closed:
        raise HTTPException(status_code=503, detail="HTTP client unavailable")
    return {"ready": True}
