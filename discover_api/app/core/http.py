"""
HTTP plumbing shared by the discovery endpoints.

Request bodies are read with an upper size bound, logged verbatim and
then decoded into a pydantic request model.  Anything that goes wrong
before the model is built is raised as ``RequestError``; the
application turns it into a plain-text HTTP 400.  Successful results
are written back as JSON.  If a result cannot be encoded the client
gets an HTTP 500 carrying the raw error text instead.

Every response produced here carries cache-disabling headers.
"""

import logging
from typing import Any, Type, TypeVar

from fastapi import Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json; charset=UTF-8"

NO_CACHE_HEADERS = {
    "Cache-Control": "max-age=0, no-cache, no-store",
    "Pragma": "no-cache",
}

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestError(Exception):
    """Raised when an inbound request cannot be read or decoded."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DiscoverJSONResponse(JSONResponse):
    media_type = JSON_MEDIA_TYPE


def set_no_cache(response: Response) -> None:
    """Tell clients and intermediaries never to cache ``response``."""
    for name, value in NO_CACHE_HEADERS.items():
        response.headers[name] = value


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "body"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


async def read_body(request: Request, max_size: int) -> bytes:
    """Read at most ``max_size + 1`` bytes of the request body.

    Reading stops as soon as the limit is crossed, so a result longer
    than ``max_size`` means the body is too large.
    """
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_size:
            break
    return bytes(body[: max_size + 1])


async def read_request(request: Request, model: Type[ModelT], max_size: int) -> ModelT:
    """Read, log and decode the body of ``request`` into ``model``.

    Parameters
    ----------
    request : Request
        Inbound request whose body has not been consumed yet.
    model : Type[BaseModel]
        Pydantic model describing the expected JSON object.
    max_size : int
        Maximum accepted body size in bytes.

    Raises
    ------
    RequestError
        If the body is too large, is not valid JSON or does not match
        ``model``.
    """
    body = await read_body(request, max_size)
    logger.info("Request %s\n%s", request.url, body[:max_size].decode("utf-8", errors="replace"))

    if len(body) > max_size:
        logger.warning("Request %s rejected: body exceeds %d bytes", request.url, max_size)
        raise RequestError(f"Error reading request: body exceeds {max_size} bytes")

    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise RequestError(f"Error parsing request: {_describe_validation_error(exc)}") from exc


def send_json_response(payload: Any) -> Response:
    """Encode ``payload`` as a JSON HTTP 200 response.

    Encoding failures are reported as HTTP 500 with the error text as
    body; there is nothing else the caller could do about them.
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        response: Response = DiscoverJSONResponse(content=payload)
    except (TypeError, ValueError) as exc:
        logger.error("Cannot encode response: %s", exc)
        response = PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    set_no_cache(response)
    return response


async def request_error_handler(request: Request, exc: RequestError) -> Response:
    """Exception handler turning ``RequestError`` into a plain-text response."""
    response = PlainTextResponse(exc.message, status_code=exc.status_code)
    set_no_cache(response)
    return response


async def no_cache_http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """FastAPI's default HTTP error response (404, 405...) plus no-cache headers."""
    response = await http_exception_handler(request, exc)
    set_no_cache(response)
    return response
