"""Translate domain and infrastructure exceptions into HTTP responses.

Protean's handlers are installed first; the ones below replace them for the
exceptions the storefront answers with its own body shape.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers
from sqlalchemy.exc import OperationalError

from emporium.shared.errors import NotAuthenticated, PermissionDenied

logger = structlog.get_logger(__name__)


async def _invalid_argument(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Invalid request", path=request.url.path, errors=exc.messages)
    return JSONResponse(status_code=400, content={"error": exc.messages})


def _details(exc: Exception):
    # ObjectNotFoundError carries its payload positionally: a field dict from command
    # handlers, a plain string from `repository.get`
    return exc.args[0] if exc.args else str(exc)


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    details = _details(exc)
    logger.info("Not found", path=request.url.path, errors=details)
    return JSONResponse(status_code=404, content={"error": details})


async def _unauthorized(request: Request, exc: NotAuthenticated) -> JSONResponse:
    logger.info("Unauthenticated request", path=request.url.path)
    return JSONResponse(
        status_code=401,
        content={"error": exc.messages},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _forbidden(request: Request, exc: PermissionDenied) -> JSONResponse:
    logger.warning("Forbidden request", path=request.url.path, errors=exc.messages)
    return JSONResponse(status_code=403, content={"error": exc.messages})


async def _unavailable(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Store unavailable", path=request.url.path, error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=503, content={"error": {"store": ["Service temporarily unavailable"]}})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    app.add_exception_handler(ValidationError, _invalid_argument)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(NotAuthenticated, _unauthorized)
    app.add_exception_handler(PermissionDenied, _forbidden)
    for exc_class in (TimeoutError, ConnectionError, OperationalError):
        app.add_exception_handler(exc_class, _unavailable)
