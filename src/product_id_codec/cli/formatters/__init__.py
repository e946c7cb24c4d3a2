"""CLI formatters package."""

from .json import (
    format_config_paths_json,
    format_ids_json,
    format_json,
    format_parse_results_json,
    format_validation_json,
)
from .table import (
    create_console,
    format_config_paths_table,
    format_config_table,
    format_ids_table,
    format_parse_table,
    format_validation_table,
)

__all__ = [
    "format_json",
    "format_ids_json",
    "format_validation_json",
    "format_parse_results_json",
    "format_config_paths_json",
    "create_console",
    "format_ids_table",
    "format_validation_table",
    "format_parse_table",
    "format_config_table",
    "format_config_paths_table",
]
