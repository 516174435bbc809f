"""
Application package initializer.

The package is split into ``core`` (configuration, logging, locking
and HTTP plumbing), ``services`` (the discovery store), ``schemas``
(request and response records) and ``api`` (routes).
"""

from .main import app  # noqa: F401
