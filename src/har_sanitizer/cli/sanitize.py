"""Sanitize command for har-sanitizer CLI."""

from __future__ import annotations

import enum
import gzip
import json
import shutil
from pathlib import Path
from typing import Annotated

import typer

from har_sanitizer.patterns import PatternLoadError

AUTO_SALT = "auto"
MEGABYTE = 1024 * 1024


class StrategyChoice(str, enum.Enum):
    """Redaction strategies accepted by --cookies and --tokens."""

    hash = "hash"
    obfuscate = "obfuscate"


def resolve_salt(salt: str, no_salt: bool) -> bool | str:
    """Map the --salt/--no-salt flags to the ``SanitizeOptions.salt`` value.

    Example:
        >>> resolve_salt("auto", False), resolve_salt("k", False), resolve_salt("k", True)
        (True, 'k', False)
    """
    if no_salt:
        return False
    if salt == AUTO_SALT:
        return True
    return salt


def describe_salt(salt: bool | str) -> str:
    if salt is True:
        return "random salt (hashes correlate within this file only)"
    if salt is False:
        return "unsalted hashes (equal values hash identically on every run)"
    return "provided salt (hashes repeat across runs with the same salt)"


def compress_file(path: Path, level: int) -> Path:
    """Write ``<path>.gz`` next to ``path`` and return it."""
    target = path.with_name(path.name + ".gz")
    with open(path, "rb") as src, gzip.open(target, "wb", compresslevel=level) as dst:
        shutil.copyfileobj(src, dst)
    return target


def _fail(message: str, *hints: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    for hint in hints:
        typer.echo(f"  {hint}", err=True)
    return typer.Exit(1)


def sanitize(
    input_file: Annotated[
        Path,
        typer.Argument(help="HAR file to sanitize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output filename (default: input.sanitized.har)"),
    ] = None,
    salt: Annotated[
        str,
        typer.Option("--salt", "-s", help="Salt for hashed values (auto: random per run)"),
    ] = AUTO_SALT,
    no_salt: Annotated[
        bool,
        typer.Option("--no-salt", help="Hash without salt"),
    ] = False,
    cookies: Annotated[
        StrategyChoice,
        typer.Option("--cookies", help="How cookie values are redacted"),
    ] = StrategyChoice.hash,
    tokens: Annotated[
        StrategyChoice,
        typer.Option("--tokens", help="How tokens and the Authorization credential are redacted"),
    ] = StrategyChoice.hash,
    patterns: Annotated[
        Path | None,
        typer.Option("--patterns", "-p", help="JSON file with extra field names"),
    ] = None,
    max_size: Annotated[
        int,
        typer.Option("--max-size", min=0, help="Refuse files over this many MB (0: no limit)"),
    ] = 100,
    compress: Annotated[
        bool,
        typer.Option("--compress", "-c", help="Also write a gzip copy of the output"),
    ] = False,
    compression_level: Annotated[
        int,
        typer.Option("--compression-level", min=1, max=9, help="Gzip level for --compress"),
    ] = 9,
) -> None:
    """Redact cookies, tokens and credentials from a HAR file.

    Cookie, Set-Cookie and Authorization headers, cookie arrays, query
    strings, Referer/Location URLs and JSON or form-encoded bodies are
    redacted. Bodies in any other format are replaced entirely.

    Example:
        har-sanitizer sanitize capture.har
        har-sanitizer sanitize capture.har --output clean.har --compress
        har-sanitizer sanitize capture.har --salt my-key
        har-sanitizer sanitize capture.har --cookies obfuscate --tokens obfuscate
    """
    from har_sanitizer.sanitization import (
        EntrySanitizationError,
        HarSizeError,
        HarValidationError,
        SanitizeOptions,
        sanitize_har_file,
    )

    if not input_file.exists():
        raise _fail(f"File not found: {input_file}")

    options = SanitizeOptions(
        salt=resolve_salt(salt, no_salt),
        cookies=cookies.value,
        tokens=tokens.value,
    )

    typer.echo(f"Sanitizing {input_file}...")
    typer.echo(f"  cookies: {options.cookies}, tokens: {options.tokens}, {describe_salt(options.salt)}")

    try:
        result_path = Path(
            sanitize_har_file(
                input_file,
                output,
                options=options,
                custom_patterns=patterns,
                max_size=max_size * MEGABYTE if max_size else None,
            )
        )
    except HarSizeError as e:
        raise _fail(
            f"File too large ({e.size / MEGABYTE:.1f} MB > {e.max_size / MEGABYTE:.1f} MB limit)",
            "Use --max-size to raise the limit or --max-size 0 to disable it",
        ) from None
    except json.JSONDecodeError as e:
        raise _fail(f"Invalid JSON in HAR file: {e.msg} at line {e.lineno}") from None
    except HarValidationError as e:
        raise _fail(f"Invalid HAR file: {e}") from None
    except PatternLoadError as e:
        raise _fail(f"Failed to load patterns: {e}") from None
    except EntrySanitizationError as e:
        raise _fail(str(e), "No output was written") from None
    except OSError as e:
        raise _fail(f"I/O error: {e}") from None

    typer.echo(f"  Sanitized: {result_path}")

    if compress:
        compressed = compress_file(result_path, compression_level)
        typer.echo(f"  Compressed: {compressed} ({compressed.stat().st_size / MEGABYTE:.1f} MB)")

    typer.echo()
    typer.echo("WARNING: Automated sanitization is best-effort.")
    typer.echo("Only known header, cookie and field names are redacted. Run")
    typer.echo("'har-sanitizer validate' and search the output for any passwords,")
    typer.echo("keys or personal data you used before sharing it.")
