"""Entrypoint: binds PORT from the environment and serves hello_service."""
import logging
import socket
import sys

import uvicorn

from hello_service.config import Settings, settings as env_settings

logger = logging.getLogger(__name__)


def build_config(settings: Settings) -> uvicorn.Config:
    return uvicorn.Config(
        "hello_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


def bind(config: uvicorn.Config) -> socket.socket:
    """Bind the listening socket, exiting with status 1 if the port is unusable."""
    if not 0 < config.port <= 65535:
        logger.error(f"Port {config.port} is out of range")
        sys.exit(1)
    # uvicorn logs the OSError and exits 1 when the bind is refused
    return config.bind_socket()


def serve(settings: Settings | None = None) -> None:
    config = build_config(settings or env_settings)
    sock = bind(config)
    print(f"Server listening on port {config.port}...", flush=True)
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    serve()
