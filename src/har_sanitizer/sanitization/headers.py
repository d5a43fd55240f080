"""Header sanitization.

Each side of the transaction has a table mapping a lowercase header name to
the handler that sanitizes its value. Headers not in the table pass through.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal

from har_sanitizer.sanitization.cookies import sanitize_cookie_header, sanitize_set_cookie_header
from har_sanitizer.sanitization.url import sanitize_url

if TYPE_CHECKING:
    from har_sanitizer.sanitization.redactor import Redactor

Side = Literal["request", "response"]
HeaderHandler = Callable[[str, "Redactor"], str]

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_authorization_header(value: str, redactor: Redactor) -> str:
    """Redact the credential of an ``Authorization`` header, keeping the scheme.

    Example:
        >>> from har_sanitizer.sanitization.redactor import Redactor, SanitizeOptions
        >>> r = Redactor.create(SanitizeOptions(tokens="obfuscate"))
        >>> sanitize_authorization_header("Bearer abc123", r)
        'Bearer obfuscated'
    """
    if not value.strip():
        return value
    parts = _WHITESPACE_RE.split(value.strip(), maxsplit=1)
    if len(parts) < 2:
        # No scheme, the whole value is the credential
        return redactor.redact_token(value.strip())
    scheme, credential = parts
    return f"{scheme} {redactor.redact_token(credential)}"


REQUEST_HEADER_HANDLERS: dict[str, HeaderHandler] = {
    "cookie": sanitize_cookie_header,
    "authorization": sanitize_authorization_header,
    "referer": sanitize_url,
}

RESPONSE_HEADER_HANDLERS: dict[str, HeaderHandler] = {
    "set-cookie": sanitize_set_cookie_header,
    "location": sanitize_url,
}

_HANDLERS: dict[str, dict[str, HeaderHandler]] = {
    "request": REQUEST_HEADER_HANDLERS,
    "response": RESPONSE_HEADER_HANDLERS,
}


def sanitize_header_value(name: str, value: str, redactor: Redactor, side: Side = "request") -> str:
    """Sanitize a header value if its name has a handler on this side.

    Args:
        name: Header name (matched case-insensitively)
        value: Header value
        redactor: Redactor for this sanitization call
        side: "request" or "response"

    Returns:
        Sanitized value or the original value when no handler applies
    """
    handler = _HANDLERS[side].get(name.lower())
    if handler is None:
        return value
    return handler(value, redactor)


def sanitize_headers(headers: list[Any], redactor: Redactor, side: Side = "request") -> list[Any]:
    """Sanitize a list of HAR headers, preserving order and name case.

    Returns:
        New list of header dicts
    """
    result = []
    for header in headers:
        if (
            isinstance(header, dict)
            and isinstance(header.get("name"), str)
            and isinstance(header.get("value"), str)
        ):
            sanitized = sanitize_header_value(header["name"], header["value"], redactor, side)
            if sanitized != header["value"]:
                header = {**header, "value": sanitized}
        result.append(header)
    return result
