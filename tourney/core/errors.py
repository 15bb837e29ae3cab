"""
Error taxonomy for request handlers.

Services raise these; the handlers registered by ``register_error_handlers``
render every one of them as ``{"error": message}`` with its status code.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TourneyError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TourneyError):
    """Malformed or missing input."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(TourneyError):
    """Duplicate active registration."""
    status_code = status.HTTP_409_CONFLICT


class AuthError(TourneyError):
    """Bad credentials or missing session."""
    status_code = status.HTTP_401_UNAUTHORIZED


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def tourney_error_handler(request: Request, exc: TourneyError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "Requête invalide")


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Erreur serveur")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TourneyError, tourney_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
