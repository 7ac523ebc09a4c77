"""
toonbridge command line interface.

Commands read from a file argument or stdin and write results to stdout;
logs and warnings go to stderr.
"""

from __future__ import annotations

import os
import sys

import click

from toonbridge import __version__
from toonbridge.codec.decoder import ToonDecoder
from toonbridge.codec.encoder import ToonEncoder
from toonbridge.codec.json_text import dumps, loads
from toonbridge.services.conversion_service import get_conversion_service
from toonbridge.services.savings import estimate_token_savings
from toonbridge.services.usage import get_usage_info
from toonbridge.types.core import ConversionMode
from toonbridge.types.errors import ToonBridgeError
from toonbridge.utils.logger import configure_logging, logger
from toonbridge.utils.serialization import serialize_to_primitives

MODE_CHOICES = [mode.value for mode in ConversionMode]


def _read_source(source) -> str:
    text = source.read()
    if not text.strip():
        raise click.ClickException("Input is empty")
    return text


def _load_json(text: str):
    try:
        return loads(text)
    except (ValueError, RecursionError) as e:
        raise click.ClickException(f"Invalid JSON: {e}") from e


def _echo_json(data) -> None:
    click.echo(dumps(data, indent=2))


@click.group(invoke_without_command=True)
@click.version_option(__version__, message="toonbridge v%(version)s")
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """toonbridge - JSON ⇄ TOON Converter.

    Encode JSON arrays of objects as compact TOON tables, and decode TOON
    back into JSON.
    """
    configure_logging(debug=debug or None)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def encode(source) -> None:
    """Encode a JSON array of objects (FILE or stdin) as TOON."""
    data = _load_json(_read_source(source))
    try:
        output = ToonEncoder().encode(data)
    except ToonBridgeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(output)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--strict", is_flag=True, help="Fail when the header count does not match the rows.")
def decode(source, strict: bool) -> None:
    """Decode TOON (FILE or stdin) into pretty-printed JSON."""
    try:
        result = ToonDecoder().decode(_read_source(source))
    except ToonBridgeError as e:
        raise click.ClickException(str(e)) from e

    for warning in result.warnings:
        click.echo(f"Warning: {warning.message}", err=True)
    if strict and result.has_warnings:
        raise click.ClickException("Header count does not match the number of rows")

    _echo_json(serialize_to_primitives(result.records))


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--mode",
    "-m",
    type=click.Choice(MODE_CHOICES),
    required=True,
    help="Conversion direction.",
)
def convert(source, mode: str) -> None:
    """Run a full conversion request and print the response as JSON."""
    response = get_conversion_service().convert(source.read(), mode)
    _echo_json(response.to_dict())
    if not response.ok:
        sys.exit(1)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def savings(source) -> None:
    """Estimate token savings of TOON over compact JSON."""
    estimate = estimate_token_savings(_load_json(_read_source(source)))
    _echo_json(estimate)
    if "error" in estimate:
        sys.exit(1)


@cli.command()
def info() -> None:
    """Show the TOON format rules and worked examples."""
    _echo_json(get_usage_info())


@cli.command()
def server() -> None:
    """Run the MCP server over stdio."""
    os.environ["TOONBRIDGE_MCP_SERVER"] = "true"
    from toonbridge.mcp_server.server import run_server

    logger.info("Starting toonbridge MCP server")
    run_server()


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
