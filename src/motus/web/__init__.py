"""HTTP API for motus."""

from .app import create_app

__all__ = ["create_app"]
