"""Main CLI entry point for har-sanitizer.

Provides commands for:
- sanitize: Redact cookies, tokens and credentials from HAR files
- validate: List the parts of a HAR file sanitize would copy unchanged
"""

from __future__ import annotations

import logging

try:
    import typer
except ImportError as e:
    raise ImportError("CLI dependencies not installed. Install with: pip install har-sanitizer[cli]") from e

from har_sanitizer.cli.sanitize import sanitize
from har_sanitizer.cli.validate import validate

PACKAGE_LOGGER = "har_sanitizer"

# -v shows INFO (files written), -vv shows DEBUG (bodies replaced whole)
_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

app = typer.Typer(
    name="har-sanitizer",
    help="Redact cookies, tokens and credentials from HAR files.",
    no_args_is_help=True,
)

app.command()(sanitize)
app.command()(validate)


def configure_logging(verbosity: int) -> int:
    """Send library log records to stderr at a level chosen by ``-v`` count.

    Returns:
        The level set on the ``har_sanitizer`` logger
    """
    level = _LOG_LEVELS[min(max(verbosity, 0), len(_LOG_LEVELS) - 1)]
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level


def _show_version(value: bool) -> None:
    if not value:
        return
    from har_sanitizer import __version__

    typer.echo(f"har-sanitizer {__version__}")
    raise typer.Exit()


@app.callback()
def main(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log files written (-v) or every body replaced whole (-vv).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    r"""Redact cookies, tokens and credentials from HAR files.

    \b
    Examples:
        har-sanitizer sanitize capture.har
        har-sanitizer sanitize capture.har --cookies obfuscate --tokens obfuscate
        har-sanitizer -v sanitize capture.har --salt my-key
        har-sanitizer validate capture.har --strict
    """
    configure_logging(verbose)
