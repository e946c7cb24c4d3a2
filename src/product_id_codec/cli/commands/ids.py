"""Identifier commands for the pidc CLI."""

from typing import Optional, Tuple

import click

from ...codec import ProductIdCodec
from ...errors import IdentifierError
from ..formatters import (
    create_console,
    format_ids_json,
    format_ids_table,
    format_json,
    format_parse_results_json,
    format_parse_table,
    format_validation_json,
    format_validation_table,
)
from ..utils import ExitCode, handle_error


@click.command()
@click.option("--type", "product_type", default="other", show_default=True, help="Product category.")
@click.option("--sequence", type=int, help="Sequence number. Defaults to the current time in milliseconds.")
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True, help="Number of consecutive ids.")
@click.option("--custom-id", help="Use this identifier instead of encoding a sequence (validated first).")
@click.pass_context
def generate(
    ctx: click.Context,
    product_type: str,
    sequence: Optional[int],
    count: int,
    custom_id: Optional[str],
) -> None:
    """Generate product identifiers."""
    codec: ProductIdCodec = ctx.obj["codec"]

    if count > 1 and sequence is None:
        handle_error(click.BadParameter("--count greater than 1 requires --sequence"), ExitCode.INVALID_USAGE)
    if count > 1 and custom_id:
        handle_error(click.BadParameter("--count cannot be combined with --custom-id"), ExitCode.INVALID_USAGE)

    try:
        if sequence is None:
            ids = [codec.generate(type=product_type, custom_id=custom_id)]
        else:
            ids = [
                codec.generate(type=product_type, sequence=sequence + offset, custom_id=custom_id)
                for offset in range(count)
            ]
    except IdentifierError as e:
        handle_error(e, ExitCode.INVALID_ID)

    if ctx.obj["format"] == "json":
        format_json(format_ids_json(ids))
    else:
        format_ids_table(ids, create_console(no_color=ctx.obj["no_color"]))


@click.command()
@click.argument("product_ids", nargs=-1, required=True)
@click.pass_context
def validate(ctx: click.Context, product_ids: Tuple[str, ...]) -> None:
    """Check identifiers against the active configuration.

    Exits with code 3 when any identifier is invalid.
    """
    codec: ProductIdCodec = ctx.obj["codec"]
    results = [(product_id, codec.validate(product_id)) for product_id in product_ids]

    if ctx.obj["format"] == "json":
        format_json(format_validation_json(results))
    else:
        format_validation_table(results, create_console(no_color=ctx.obj["no_color"]))

    if not all(valid for _, valid in results):
        ctx.exit(ExitCode.INVALID_ID)


@click.command()
@click.argument("product_ids", nargs=-1, required=True)
@click.pass_context
def parse(ctx: click.Context, product_ids: Tuple[str, ...]) -> None:
    """Decompose identifiers into type and sequence."""
    codec: ProductIdCodec = ctx.obj["codec"]
    results = [(product_id, codec.parse(product_id)) for product_id in product_ids]

    if ctx.obj["format"] == "json":
        format_json(format_parse_results_json(results))
    else:
        format_parse_table(results, create_console(no_color=ctx.obj["no_color"]))
