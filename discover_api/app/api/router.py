"""
Top-level router.

The discovery routes live at the root of the server (``/put`` and
``/get``) because existing clients address them without a prefix.
"""

from fastapi import APIRouter

from .endpoints import discovery

router = APIRouter()

router.include_router(discovery.router, tags=["discovery"])
