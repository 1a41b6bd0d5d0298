from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import Response

from ..core.registry import AlbumNotFoundError
from .responses import IndentedJSONResponse
from .serializers import message

logger = logging.getLogger(__name__)


class RequestBodyInvalidError(ValueError):
    """The request body could not be decoded into an album."""


def _first_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid body"
    return str(errors[0].get("msg", "invalid body"))


def _abort_bad_request(request: Request, reason: str) -> Response:
    # The request is aborted: status only, no body.
    logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, reason)
    return Response(status_code=400)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AlbumNotFoundError)
    async def _album_not_found(request: Request, exc: AlbumNotFoundError) -> IndentedJSONResponse:
        return IndentedJSONResponse(status_code=404, content=message("album not found"))

    @app.exception_handler(RequestBodyInvalidError)
    async def _body_invalid(request: Request, exc: RequestBodyInvalidError) -> Response:
        return _abort_bad_request(request, str(exc))

    # Malformed JSON never reaches a handler; FastAPI reports it as a validation error.
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> Response:
        return _abort_bad_request(request, _first_validation_error(exc))
