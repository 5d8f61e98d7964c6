"""Single-route HTTP server answering ``/`` with an empty 200 response."""
from emptyok.app import create_app
from emptyok.errors import BindError
from emptyok.server import HOST, PORT, start

__version__ = "0.1.0"

__all__ = ["create_app", "BindError", "HOST", "PORT", "start"]
