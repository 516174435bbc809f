"""
Pydantic schemas for the discovery endpoints.

Each endpoint has its own request and response record.  All request
fields are required strings but may be empty; unknown fields in the
payload are ignored.
"""

from typing import List

from pydantic import BaseModel, Field


class PutRequest(BaseModel):
    """Body of ``POST /put``."""

    key: str = Field(..., description="Primary key the value is published under")
    sub: str = Field(..., description="Sub-key, unique within the primary key")
    value: str = Field(..., description="Value stored in the slot")


class PutResponse(BaseModel):
    """Empty success payload of ``POST /put``."""


class GetRequest(BaseModel):
    """Body of ``POST /get``."""

    key: str = Field(..., description="Primary key to list")


class GetResponseValue(BaseModel):
    sub: str
    value: str


class GetResponse(BaseModel):
    """Sub-entries of a primary key in insertion order."""

    value_list: List[GetResponseValue] = Field(default_factory=list)
