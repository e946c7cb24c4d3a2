"""Main CLI application for the product identifier codec."""

from typing import Any, Dict, Optional

import click
import rich_click as rich_click

from ..codec import ProductIdCodec
from ..config import IdFormat
from ..errors import ConfigurationError
from .utils import ExitCode, configure_logging, handle_error, resolve_format, resolve_log_level

# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.USE_MARKDOWN = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True


def build_codec(config_path: Optional[str], overrides: Dict[str, Any]) -> ProductIdCodec:
    """Create the codec for this invocation: config file first, then CLI overrides."""
    codec = ProductIdCodec.from_config_file(config_path)
    if overrides:
        codec.update_config(overrides)
    return codec


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="YAML configuration file. Defaults to PRODUCT_ID_CODEC_CONFIG, then the user config directory.",
)
@click.option(
    "--id-format",
    type=click.Choice([f.value for f in IdFormat], case_sensitive=False),
    help="Identifier encoding scheme.",
)
@click.option("--length", type=int, help="Identifier body length.")
@click.option("--prefix", type=str, help="Literal prefix.")
@click.option("--suffix", type=str, help="Literal suffix.")
@click.option("--separator", type=str, help="Literal placed between prefix and body.")
@click.option(
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Output format. Defaults to 'table' for TTY, 'json' for non-TTY.",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (can be used multiple times).")
@click.option("--quiet", "-q", count=True, help="Decrease verbosity (can be used multiple times).")
@click.option("--debug", is_flag=True, help="Enable debug-level logging.")
@click.option("--no-color", is_flag=True, help="Disable color output.")
@click.version_option(package_name="product-id-codec", prog_name="pidc")
@click.pass_context
def app(
    ctx: click.Context,
    config_path: Optional[str] = None,
    id_format: Optional[str] = None,
    length: Optional[int] = None,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    separator: Optional[str] = None,
    format: Optional[str] = None,
    verbose: int = 0,
    quiet: int = 0,
    debug: bool = False,
    no_color: bool = False,
) -> None:
    """Product ID codec CLI - generate, validate and parse product identifiers.

    Settings come from the YAML configuration file (if any) and are then
    overridden by the options given here.

    Examples:
      # Ten custom-format ids for electronics, starting at 456
      pidc --id-format custom generate --type electronics --sequence 456 --count 10

      # Check identifiers from a catalog export
      pidc --prefix SKU --separator - validate SKU-00000001 SKU-00000002

      # Show the effective configuration
      pidc config show
    """
    ctx.ensure_object(dict)

    log_level = resolve_log_level(verbose, quiet, debug)
    configure_logging(log_level)

    overrides: Dict[str, Any] = {}
    if id_format is not None:
        overrides["format"] = id_format
    if length is not None:
        overrides["length"] = length
    if prefix is not None:
        overrides["prefix"] = prefix
    if suffix is not None:
        overrides["suffix"] = suffix
    if separator is not None:
        overrides["separator"] = separator

    try:
        codec = build_codec(config_path, overrides)
    except ConfigurationError as e:
        handle_error(e, ExitCode.CONFIG_ERROR)

    ctx.obj.update(
        {
            "codec": codec,
            "config_path": config_path,
            "format": resolve_format(format),
            "verbose": verbose,
            "quiet": quiet,
            "debug": debug,
            "no_color": no_color,
            "log_level": log_level,
        }
    )


# Import and register subcommands after the group exists to avoid circular imports.
from .commands import config, ids  # noqa: E402

app.add_command(ids.generate)
app.add_command(ids.validate)
app.add_command(ids.parse)
app.add_command(config.config)


def main() -> None:
    """Console-script entry point."""
    app(obj={})
