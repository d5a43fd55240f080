"""CLI for har-sanitizer.

This module provides a Typer-based CLI for HAR sanitization and
structure validation.

Requires the 'cli' optional dependency: pip install har-sanitizer[cli]
"""

from __future__ import annotations
