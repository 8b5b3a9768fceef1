"""HTTP server package: FastAPI app exposing the mouse action endpoints."""

from mouse_relay.server.app import create_app

__all__ = ["create_app"]
