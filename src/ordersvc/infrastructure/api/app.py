"""Order service FastAPI application.

Usage:
    uvicorn ordersvc.infrastructure.api.app:create_app --factory --port 8000
"""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ordersvc.application.notifier import Notifier
from ordersvc.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from ordersvc.domain.repository.unit_of_work import UnitOfWork
from ordersvc.infrastructure import bootstrap
from ordersvc.infrastructure.api.routes import router
from ordersvc.infrastructure.config import Settings
from ordersvc.infrastructure.logging import add_context, clear_context, configure_logging
from ordersvc.infrastructure.persistence.database import create_schema

logger = structlog.get_logger(__name__)

# One status per exception type; anything else in the hierarchy is a 500.
_STATUS_BY_EXCEPTION: dict[type[DomainException], int] = {
    ValidationError: 400,
    EntityNotFoundError: 404,
    StorageError: 500,
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = next(
        (code for kind, code in _STATUS_BY_EXCEPTION.items() if isinstance(exc, kind)),
        500,
    )
    if status_code >= 500:
        # The fault has been logged; callers get no driver or SQL detail
        logger.error("Request failed", error=str(exc), error_type=type(exc).__name__)
        return _error(status_code, "Internal server error")
    logger.info("Request rejected", status_code=status_code, error=str(exc))
    return _error(status_code, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Request rejected", status_code=400, errors=exc.errors())
    return _error(400, "Required fields missing or invalid")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", error_type=type(exc).__name__, exc_info=exc)
    return _error(500, "Internal server error")


def create_app(
    settings: Settings | None = None,
    uow_factory: Callable[[], UnitOfWork] | None = None,
    notifier: Notifier | None = None,
) -> FastAPI:
    """Build the application; collaborators default to the bootstrap wiring.

    Called with no settings (as uvicorn's factory loader does, including
    in a --reload worker), the app configures logging from the environment.
    With the default persistence, missing tables are created at startup.
    """
    if settings is None:
        settings = bootstrap.settings()
        configure_logging(settings)

    app = FastAPI(
        title="Order Service API",
        description="Order creation, lookup, status updates and sales reporting",
    )
    app.state.settings = settings
    if uow_factory is None:
        create_schema(bootstrap.engine(settings.database_url))
        uow_factory = bootstrap.unit_of_work_factory(settings)
    app.state.uow_factory = uow_factory
    app.state.notifier = notifier or bootstrap.notifier(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind request details to every log line emitted while serving it."""
        clear_context()
        add_context(
            request_id=request.headers.get("x-request-id") or uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        try:
            return await call_next(request)
        finally:
            clear_context()

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
