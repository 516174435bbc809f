"""Command line entry point for the simple discover server.

Resolves the listen address from the command line and serves the
FastAPI application with uvicorn.

Usage:
    python -m discover_api                  # 0.0.0.0:65001
    python -m discover_api -p 8080          # custom port
    python -m discover_api -a 127.0.0.1     # specific address
    python -m discover_api -i eth0          # first IPv4 address of eth0
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from uvicorn import Config, Server

from discover_api.app.core.config import settings
from discover_api.app.core.logging_config import setup_logging
from discover_api.app.core.network import ListenAddressError, resolve_listen_address
from discover_api.app.main import create_app


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Simple discover server.")
    ap.add_argument("-i", "--interface", default="", help="Listen interface")
    ap.add_argument("-a", "--address", default="", help="Listen address")
    ap.add_argument("-p", "--port", type=int, default=settings.listen_port, help="Listen port")
    return ap.parse_args(argv)


def build_config(host: str, port: int) -> Config:
    """Uvicorn config for a fresh application.

    ``log_config=None`` keeps uvicorn from installing its own handlers;
    its loggers propagate to the root configured by ``setup_logging``.
    """
    return Config(
        app=create_app(),
        host=host,
        port=port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


async def serve(host: str, port: int) -> None:
    """Serve a freshly created application until the server stops."""
    server = Server(build_config(host, port))
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(settings.log_level, settings.log_file or None)

    logger.info("Hello this is simple discover server")

    if args.port <= 0 or args.port > 65535:
        logger.error("Invalid listen port %d", args.port)
        sys.exit(1)

    try:
        host = resolve_listen_address(args.interface, args.address)
    except ListenAddressError as exc:
        logger.error("Fatal error: %s", exc)
        sys.exit(1)

    logger.info("Listening on %s:%d", host, args.port)
    try:
        asyncio.run(serve(host, args.port))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
