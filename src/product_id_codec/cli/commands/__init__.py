"""CLI commands package."""

# Import all command modules to make them available
from . import config, ids

__all__ = ["ids", "config"]
