"""
Server Entry Point

Builds the settings once, configures logging, binds the listening socket
and serves the application with uvicorn. Failure to bind is fatal.
"""

import logging
import math
import socket
import sys
from typing import Optional

import uvicorn

from shortener.core.setting import Settings
from shortener.main import create_app

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("GET", "/", "Service info"),
    ("GET", "/health", "Health check"),
    ("GET", "/ready", "Readiness check"),
    ("POST", "/shorten", "Shorten URL"),
)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind the listening socket.

    Raises:
        OSError: The address is unavailable
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def log_banner(settings: Settings) -> None:
    logger.info("Starting %s on port %s", settings.SERVICE_NAME, settings.PORT)
    logger.info("Environment: %s", settings.ENVIRONMENT)
    logger.info("Version: %s", settings.VERSION)
    logger.info("Endpoints:")
    for method, path, description in ENDPOINTS:
        logger.info("   - %-4s %-9s - %s", method, path, description)


def build_config(settings: Settings) -> uvicorn.Config:
    """uvicorn config for the app. Keep-alive idle timeout is rounded up to whole seconds."""
    return uvicorn.Config(
        create_app(settings),
        timeout_keep_alive=math.ceil(settings.IDLE_TIMEOUT),
        log_config=None,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=False,
    )


def serve(settings: Optional[Settings] = None) -> None:
    """Run the HTTP server until interrupted. Exits with status 1 if the port cannot be bound."""
    if settings is None:
        settings = Settings()

    configure_logging(settings.LOG_LEVEL)
    log_banner(settings)

    try:
        sock = bind_socket(settings.HOST, settings.PORT)
    except OSError as e:
        logger.critical("Server failed to start: %s", e)
        sys.exit(1)

    server = uvicorn.Server(build_config(settings))
    server.run(sockets=[sock])


def main() -> None:
    serve()
