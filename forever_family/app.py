"""
FastAPI application entry point for the Forever Family backend.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forever_family import site
from forever_family.config import get_settings
from forever_family.errors import ServiceError
from forever_family.routes import router

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _service_error_handler(request: Request, exc: ServiceError):
    return _error_response(exc.status_code, exc.message)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error_response(400, "Invalid request body.")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Forever Family Backend", version="0.1.0")
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.include_router(router, prefix=settings.api_prefix)
    # Registered last so the catch-all GET never shadows an API route.
    app.include_router(site.router)
    return app


app = create_app()
