"""FastAPI app factory: coaster routes, admin page, health and request logging."""
from __future__ import annotations

import os
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Optional
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router as api_router
from app.api.models import HealthResponse
from app.config import get_admin_password_from_env
from app.domain.admin import AdminPortal
from app.domain.store import CoasterStore
from app.logging_conf import get_logger, setup_logging

# Configure logging before anything else.
setup_logging()
logger = get_logger("app")


def create_app(
    store: Optional[CoasterStore] = None,
    admin_password: Optional[str] = None,
) -> FastAPI:
    """Build the application around an explicit store and admin secret.

    Omitted collaborators are created here: a fresh empty store, and the secret
    read from ADMIN_PASSWORD (raises `ConfigError` when unset).
    Serve with `python -m app` or `uvicorn app.main:create_app --factory --port 8080`.
    """
    if store is None:
        store = CoasterStore()
    if admin_password is None:
        admin_password = get_admin_password_from_env()

    admin = AdminPortal(admin_password)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("startup", extra={"event": "startup", "coasters": len(store)})
        yield
        logger.info("shutdown", extra={"event": "shutdown", "coasters": len(store)})

    app = FastAPI(
        title="Coaster Store",
        version=os.getenv("APP_VERSION", "0.1.0"),
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.admin = admin

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_error(request: Request, exc: StarletteHTTPException) -> Response:
        """Render client and auth errors as short plain-text bodies."""
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def plain_text_internal_error(request: Request, exc: Exception) -> Response:
        return PlainTextResponse(str(exc) or type(exc).__name__, status_code=500)

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """JSON request logging with correlation id.

        - If the client sends X-Request-ID we propagate it; otherwise we mint one
        - Logs a start and end event with method/path/status/elapsed_ms
        - Attaches X-Request-ID header on the response for easy tracing
        """
        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception as exc:  # Log and re-raise; the 500 handler renders it
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "path": request.url.path,
                    "method": request.method,
                    "request_id": request_id,
                },
            )
            raise exc
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/health", response_model=HealthResponse, summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True})

    app.include_router(api_router)

    return app
