"""HTTP API around a single checkers game session."""

from .app import app, create_app

__all__ = ["app", "create_app"]
