"""Rich table formatter for CLI output."""

import sys
from typing import Any, Dict, List, Optional, TextIO, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...codec import ParseResult


def create_console(output: Optional[TextIO] = None, no_color: bool = False) -> Console:
    """Create a Rich console instance.

    Args:
        output: Output stream (defaults to stdout)
        no_color: Disable color output

    Returns:
        Console instance
    """
    if output is None:
        output = sys.stdout

    return Console(file=output, no_color=no_color)


def _format_value(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value == "":
        return '""'
    return str(value)


def format_ids_table(ids: List[str], console: Optional[Console] = None) -> None:
    """Print generated identifiers as a table."""
    if console is None:
        console = create_console()

    table = Table(title="Generated Product IDs", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Product ID", style="cyan")
    for index, product_id in enumerate(ids, start=1):
        table.add_row(str(index), product_id)
    console.print(table)


def format_validation_table(results: List[Tuple[str, bool]], console: Optional[Console] = None) -> None:
    """Print validation outcomes as a table."""
    if console is None:
        console = create_console()

    table = Table(title="Validation", show_header=True, header_style="bold magenta")
    table.add_column("Product ID", style="cyan")
    table.add_column("Valid", justify="center")
    for product_id, valid in results:
        table.add_row(product_id, Text(_format_value(valid), style="green" if valid else "red"))
    console.print(table)


def format_parse_table(results: List[Tuple[str, ParseResult]], console: Optional[Console] = None) -> None:
    """Print parse results as a table."""
    if console is None:
        console = create_console()

    table = Table(title="Parsed Product IDs", show_header=True, header_style="bold magenta")
    for column in ("Product ID", "Valid", "Base ID", "Type", "Type Code", "Sequence", "Error"):
        table.add_column(column)
    for product_id, result in results:
        table.add_row(
            product_id,
            _format_value(result.valid),
            _format_value(result.base_id),
            _format_value(result.type),
            _format_value(result.type_code),
            _format_value(result.sequence),
            _format_value(result.error),
        )
    console.print(table)


def format_config_table(config: Dict[str, Any], type_codes: Dict[str, str], console: Optional[Console] = None) -> None:
    """Print the effective configuration and the merged type-code table."""
    if console is None:
        console = create_console()

    settings = Table(title="Codec Configuration", show_header=True, header_style="bold magenta")
    settings.add_column("Setting", style="cyan")
    settings.add_column("Value")
    for key, value in config.items():
        if key in ("validation", "product_types"):
            continue
        settings.add_row(key, _format_value(value))
    for key, value in config["validation"].items():
        settings.add_row(f"validation.{key}", _format_value(value))
    console.print(settings)

    codes = Table(title="Product Types", show_header=True, header_style="bold magenta")
    codes.add_column("Category", style="cyan")
    codes.add_column("Code")
    codes.add_column("Override", justify="center")
    for category, code in type_codes.items():
        codes.add_row(category, code, _format_value(category in config["product_types"]))
    console.print(codes)


def format_config_paths_table(data: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Print configuration file resolution as a table."""
    if console is None:
        console = create_console()

    table = Table(title="Configuration Sources", show_header=True, header_style="bold magenta")
    table.add_column("Source", style="cyan")
    table.add_column("Value")
    table.add_row("Active config file", _format_value(data["active_config_file"]) if data["active_config_file"] else "built-in defaults")
    table.add_row("User config file", data["user_config_file"])
    for name, value in data["environment"].items():
        table.add_row(name, _format_value(value))
    console.print(table)
