"""Run the har-sanitizer CLI with ``python -m har_sanitizer``."""

from __future__ import annotations

import sys


def main(argv: list[str] | None = None) -> None:
    """Run the CLI on ``argv`` (default: the process arguments)."""
    try:
        from har_sanitizer.cli.main import app
    except ImportError as e:
        # Raised by cli.main with the install hint when typer is missing
        sys.exit(f"Error: {e}")

    app(args=argv, prog_name="har-sanitizer")


if __name__ == "__main__":
    main()
