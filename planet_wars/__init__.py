"""Planet Wars turn server."""

__version__ = "0.1.0"
