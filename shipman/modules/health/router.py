"""Liveness endpoint backed by a store ping."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from shipman.database.engine import engine
from shipman.database.health import ping

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> JSONResponse:
    error = await ping(engine)
    if error is not None:
        return JSONResponse(status_code=503, content={"status": "unhealthy", "error": error})
    return JSONResponse(status_code=200, content={"status": "ok"})
