"""Mouse relay: a local HTTP service that turns JSON requests into mouse input."""

__version__ = "0.1.0"
