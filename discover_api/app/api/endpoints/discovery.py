"""
Discovery endpoints.

``POST /put`` publishes a value under a primary key and sub-key,
``POST /get`` lists every sub-key published under a primary key.
Existing clients also send ``GET`` with a JSON body, so both methods
are routed; anything else gets a 405 that still carries the no-cache
headers.  Bodies are decoded by an async dependency; the endpoint bodies
themselves are plain functions, so FastAPI runs them in its
threadpool and the store lock is never held on the event loop.
"""

from typing import Callable, Type

from fastapi import APIRouter, Depends, Request, Response

from discover_api.app.core.http import ModelT, read_request, send_json_response
from discover_api.app.schemas.discovery import (
    GetRequest,
    GetResponse,
    GetResponseValue,
    PutRequest,
    PutResponse,
)
from discover_api.app.services.discovery_store import DiscoveryStore

router = APIRouter()


def get_store(request: Request) -> DiscoveryStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def decode_body(model: Type[ModelT]) -> Callable:
    """Build a dependency decoding the request body into ``model``."""

    async def dependency(request: Request) -> ModelT:
        return await read_request(request, model, request.app.state.max_request_size)

    return dependency


@router.api_route("/put", methods=["GET", "POST"])
def put_value(
    rq: PutRequest = Depends(decode_body(PutRequest)),
    store: DiscoveryStore = Depends(get_store),
) -> Response:
    """Store ``value`` under ``key``/``sub`` and answer with an empty object."""
    store.put(rq.key, rq.sub, rq.value)
    return send_json_response(PutResponse())


@router.api_route("/get", methods=["GET", "POST"])
def get_values(
    rq: GetRequest = Depends(decode_body(GetRequest)),
    store: DiscoveryStore = Depends(get_store),
) -> Response:
    """List the sub-entries of ``key`` in insertion order.

    Unknown keys produce an empty ``value_list``, never an error.
    """
    value_list = [GetResponseValue(sub=item.sub, value=item.value) for item in store.get(rq.key)]
    return send_json_response(GetResponse(value_list=value_list))
