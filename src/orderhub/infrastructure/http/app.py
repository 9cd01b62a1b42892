"""FastAPI application factory.

Domain exceptions are mapped to HTTP responses here:
``NotFoundError`` -> 404, ``ValidationError`` -> 400, anything
unexpected -> 500 after being logged.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from orderhub.domain.exceptions import NotFoundError, ValidationError
from orderhub.infrastructure.bootstrap import AppContext, build_context
from orderhub.infrastructure.config import get_settings
from orderhub.infrastructure.http import order_routes, user_routes
from orderhub.infrastructure.logger import configure_logging, get_logger

logger = get_logger(__name__)


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    kind = exc.kind.value if isinstance(exc, ValidationError) else None
    logger.info(
        "request.rejected",
        path=request.url.path,
        method=request.method,
        kind=kind,
    )
    return JSONResponse(status_code=400, content={"error": str(exc), "kind": kind})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(context: AppContext) -> FastAPI:
    app = FastAPI(title="orderhub", version="0.1.0")
    app.state.context = context

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(user_routes.router)
    app.include_router(order_routes.router)

    @app.get("/health", include_in_schema=False)
    def health() -> dict:
        return {"status": "ok"}

    return app


def build_app() -> FastAPI:
    """ASGI factory: ``uvicorn orderhub.infrastructure.http.app:build_app --factory``."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    return create_app(build_context(settings))
