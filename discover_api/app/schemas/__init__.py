"""
Pydantic schema definitions for API payloads.

Requests and responses are modelled per endpoint so that decoding is
the single place where malformed input is rejected.
"""
