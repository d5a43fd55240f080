"""HAR sanitization library.

This library redacts sensitive values from HAR (HTTP Archive) captures so
they can be shared for debugging or support:
- Cookies in Cookie/Set-Cookie headers and cookie arrays
- Authorization credentials
- Tokens and credentials in URL query strings, Referer and Location
- Sensitive fields in JSON and form-encoded bodies

Core sanitization has ZERO dependencies (only stdlib).
Optional features require: typer (cli).

Example usage:
    from har_sanitizer import sanitize_har

    clean_har = sanitize_har(har_data, {"cookies": "obfuscate"})
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export public API for convenience
from har_sanitizer.sanitization import (
    SanitizeOptions,
    sanitize,
    sanitize_entry,
    sanitize_har,
    sanitize_har_file,
)

__all__ = [
    "__version__",
    "SanitizeOptions",
    "sanitize",
    "sanitize_entry",
    "sanitize_har",
    "sanitize_har_file",
]
