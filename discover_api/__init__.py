"""
Top-level package for the simple discover server.

All functionality lives in submodules under ``app``; the command line
entry point is ``discover_api.run``.
"""

__version__ = "1.0.0"
