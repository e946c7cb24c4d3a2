"""Product ID codec CLI package."""

from .app import app, main

__all__ = ["app", "main"]
