"""Configuration inspection commands for the pidc CLI."""

import click

from ...codec import ProductIdCodec
from ...config_paths import get_codec_config_path, get_user_config_path
from ..formatters import (
    create_console,
    format_config_paths_json,
    format_config_paths_table,
    format_config_table,
    format_json,
)
from ..utils import get_codec_env_vars


@click.group()
def config() -> None:
    """Inspect the codec configuration."""
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the effective configuration and product type codes."""
    codec: ProductIdCodec = ctx.obj["codec"]
    data = codec.get_config().to_dict()
    type_codes = codec.registry.as_dict()

    if ctx.obj["format"] == "json":
        format_json({"config": data, "type_codes": type_codes})
    else:
        format_config_table(data, type_codes, create_console(no_color=ctx.obj["no_color"]))


@config.command()
@click.pass_context
def paths(ctx: click.Context) -> None:
    """Show where configuration is read from."""
    data = format_config_paths_json(
        ctx.obj.get("config_path") or get_codec_config_path(),
        str(get_user_config_path()),
        get_codec_env_vars(),
    )

    if ctx.obj["format"] == "json":
        format_json(data)
    else:
        format_config_paths_table(data, create_console(no_color=ctx.obj["no_color"]))
