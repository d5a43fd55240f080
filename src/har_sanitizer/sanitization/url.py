"""URL query string sanitization.

Used for the request URL and for the ``Referer`` and ``Location`` headers.
Matching parameters are rewritten in place; every other part of the URL,
including unmatched parameters and their encoding, is kept as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, unquote_plus, urlsplit, urlunsplit

if TYPE_CHECKING:
    from har_sanitizer.sanitization.redactor import Redactor


def sanitize_query(query: str, redactor: Redactor) -> str:
    """Sanitize a raw query string (without the leading ``?``)."""
    params = []
    for param in query.split("&"):
        raw_name, sep, raw_value = param.partition("=")
        redacted = redactor.redact_field(unquote_plus(raw_name), unquote_plus(raw_value))
        if redacted is None:
            params.append(param)
        else:
            params.append(f"{raw_name}={quote(redacted, safe='')}")
    return "&".join(params)


def sanitize_url(url: str, redactor: Redactor) -> str:
    """Sanitize sensitive query parameters in a URL.

    Args:
        url: Absolute or relative URL
        redactor: Redactor for this sanitization call

    Returns:
        URL with sensitive parameter values replaced. A URL that cannot be
        split still has its query string redacted.

    Example:
        >>> from har_sanitizer.sanitization.redactor import Redactor, SanitizeOptions
        >>> r = Redactor.create(SanitizeOptions(tokens="obfuscate"))
        >>> sanitize_url("https://example.com/cb?token=abc&page=2", r)
        'https://example.com/cb?token=obfuscated&page=2'
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        # Unparseable authority (e.g. a broken IPv6 host), redact the raw query
        head, sep, rest = url.partition("?")
        if not sep:
            return url
        query, hash_sep, fragment = rest.partition("#")
        return f"{head}?{sanitize_query(query, redactor)}{hash_sep}{fragment}"
    if not parts.query:
        return url
    return urlunsplit(parts._replace(query=sanitize_query(parts.query, redactor)))
