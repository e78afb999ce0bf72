"""FastAPI application factory for the Shipman chartering back office."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from shipman.config import settings
from shipman.database.engine import engine
from shipman.exceptions import AppException

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Hand pooled connections back on shutdown."""
    logger.info("Shipman API starting (%s)", settings.environment)
    yield
    await engine.dispose()
    logger.info("Database pool disposed")


def error_envelope(
    request: Request, status_code: int, code: str, message: str, details: list | None = None
) -> JSONResponse:
    """The ``{"error": {...}}`` body every failed request answers with."""
    error = {
        "code": code,
        "message": message,
        "details": details or [],
        "requestId": getattr(request.state, "request_id", "unknown"),
    }
    return JSONResponse(status_code=status_code, content={"error": error})


async def _on_app_exception(request: Request, exc: AppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return error_envelope(request, exc.status_code, exc.code, exc.message, exc.details)


async def _on_invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        fields.append({"field": location, "message": err.get("msg", "")})
    return error_envelope(request, 422, "VALIDATION_ERROR", "Validation failed", fields)


async def _on_rate_limited(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return error_envelope(request, 429, "RATE_LIMITED", str(exc.detail))


async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_envelope(request, 500, "INTERNAL_ERROR", "An unexpected error occurred.")


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(AppException, _on_app_exception)
    application.add_exception_handler(RequestValidationError, _on_invalid_request)
    application.add_exception_handler(RateLimitExceeded, _on_rate_limited)
    application.add_exception_handler(Exception, _on_unhandled)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Shipman Chartering API",
        description="Charter parties, voyages, laytime, payments and claims.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    application.state.limiter = limiter

    # --- Middleware (last added = outermost in Starlette) ---

    application.add_middleware(SlowAPIMiddleware)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from shipman.middleware.request_id import RequestIdMiddleware

    application.add_middleware(RequestIdMiddleware)

    # --- Routers ---
    from shipman.api.v1 import v1_router

    application.include_router(v1_router)

    register_exception_handlers(application)

    return application


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "shipman.app:app",
        host=settings.http_host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
