"""
Listener for the empty-ok app.

Binds 127.0.0.1:8080 and serves the app with uvicorn until the process is
stopped. The only fatal condition is a failed bind, reported as BindError.
"""
from __future__ import annotations

import logging
import signal
import socket

import uvicorn
from fastapi import FastAPI

from emptyok.app import app as default_app
from emptyok.errors import BindError

LOGGER = logging.getLogger("emptyok")

# Fixed listen address
HOST = "127.0.0.1"
PORT = 8080

BACKLOG = 2048


def bind_listener(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(BACKLOG)
    except OSError as e:
        sock.close()
        raise BindError(host, port, e) from e
    return sock


def build_server(app: FastAPI | None = None) -> uvicorn.Server:
    # No host/port here, the server always runs on a socket from bind_listener
    config = uvicorn.Config(
        app if app is not None else default_app,
        backlog=BACKLOG,
        access_log=False,
        log_level="info",
    )
    return uvicorn.Server(config)


def start() -> None:
    """Bind the fixed address and serve until stopped. Raises BindError if the bind fails."""
    sock = bind_listener(HOST, PORT)
    LOGGER.info(f"Listening on http://{HOST}:{PORT}...")
    try:
        build_server().run(sockets=[sock])
    except KeyboardInterrupt:
        pass
    finally:
        sock.close()
    LOGGER.info("Server stopped.")


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    # uvicorn re-raises the stop signal once it has shut down; treat SIGTERM like Ctrl-C
    signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        start()
    except BindError as e:
        LOGGER.error(f"Failed to start server: {e}")
        return 1
    return 0
