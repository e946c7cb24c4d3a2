"""CLI utilities package."""

from .helpers import (
    ExitCode,
    configure_logging,
    get_codec_env_vars,
    handle_error,
    resolve_format,
    resolve_log_level,
)

__all__ = [
    "ExitCode",
    "resolve_format",
    "resolve_log_level",
    "configure_logging",
    "handle_error",
    "get_codec_env_vars",
]
