"""Errors raised by the listener."""
from __future__ import annotations


class BindError(OSError):
    """The listening socket could not be created (address in use, no permission, bad address)."""

    def __init__(self, host: str, port: int, reason: OSError):
        super().__init__(f"could not bind {host}:{port}: {reason.strerror or reason}")
        self.errno = reason.errno
        self.host = host
        self.port = port
        self.reason = reason
