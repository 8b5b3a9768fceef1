"""Command-line interface for the mouse relay."""

from mouse_relay.cli.main import main, serve

__all__ = ["main", "serve"]
