"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  Command line
flags given to ``discover_api.run`` take precedence over the listen
port configured here.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Simple Discover Server")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file written in addition to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    listen_port: int = int(os.getenv("DISCOVER_PORT", "65001"))

    # Upper bound for request bodies, in bytes.  Larger requests are
    # answered with HTTP 400 before anything is decoded.
    max_request_size: int = int(os.getenv("DISCOVER_MAX_REQUEST_SIZE", str(8 * 1024)))

    # Seconds between "Still running..." log lines; 0 turns them off.
    heartbeat_interval: float = float(os.getenv("DISCOVER_HEARTBEAT", "60"))


# Environment variables must be set before this module is imported.
settings = Settings()
