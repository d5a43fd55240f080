"""Validate command for har-sanitizer CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer


def validate(
    har_file: Annotated[
        Path,
        typer.Argument(help="HAR file to check"),
    ],
    strict: Annotated[
        bool,
        typer.Option("--strict", "-s", help="Also require HAR 1.2 fields and fail on any warning"),
    ] = False,
) -> None:
    """Report the parts of a HAR file that sanitize would copy unchanged.

    Headers, cookies, query parameters and bodies in a shape the sanitizer
    does not recognize are listed by JSON path. Review them by hand before
    sharing the sanitized file.

    Example:
        har-sanitizer validate capture.har
        har-sanitizer validate capture.har --strict
    """
    from har_sanitizer.sanitization import HarValidationError, read_har_file, validate_har_structure

    if not har_file.exists():
        typer.echo(f"Error: File not found: {har_file}", err=True)
        raise typer.Exit(1)

    try:
        har_data = read_har_file(har_file, max_size=None)
        warnings = validate_har_structure(har_data, strict=strict)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in HAR file: {e.msg} at line {e.lineno}", err=True)
        raise typer.Exit(1) from None
    except HarValidationError as e:
        typer.echo(f"[ERROR] {har_file}: {e}", err=True)
        raise typer.Exit(1) from None

    entries = len(har_data["log"]["entries"])
    if not warnings:
        typer.echo(f"[OK] {har_file}: {entries} entries")
        return

    typer.echo(f"{har_file}: {entries} entries")
    for warning in warnings:
        typer.echo(f"  [WARN] {warning}")
    typer.echo(f"\nSummary: {len(warnings)} warnings")

    if strict:
        raise typer.Exit(1)
