"""Cookie header and cookie array sanitization.

Every cookie value is treated as sensitive and redacted with the cookie
strategy. Cookie names and ``Set-Cookie`` attributes are never changed.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from har_sanitizer.sanitization.redactor import Redactor

_COOKIE_SEPARATOR_RE = re.compile(r";\s*")


def sanitize_cookie_header(value: str, redactor: Redactor) -> str:
    """Sanitize a request ``Cookie`` header value.

    Args:
        value: Header value like ``"a=1; b=2"``
        redactor: Redactor for this sanitization call

    Returns:
        Pairs rejoined with ``"; "`` and a trailing ``";"``

    Example:
        >>> from har_sanitizer.sanitization.redactor import Redactor, SanitizeOptions
        >>> r = Redactor.create(SanitizeOptions(cookies="obfuscate"))
        >>> sanitize_cookie_header("sid=abc; theme=dark;", r)
        'sid=obfuscated; theme=obfuscated;'
    """
    pairs = []
    for part in _COOKIE_SEPARATOR_RE.split(value.strip()):
        if not part:
            continue
        name, sep, cookie_value = part.partition("=")
        if sep:
            pairs.append(f"{name}={redactor.redact_cookie(cookie_value)}")
        else:
            # Nameless cookie: the whole token is the value
            pairs.append(redactor.redact_cookie(name))
    if not pairs:
        return value
    return "; ".join(pairs) + ";"


def _sanitize_set_cookie_line(line: str, redactor: Redactor) -> str:
    pair, sep, attributes = line.partition(";")
    name, eq, cookie_value = pair.partition("=")
    if not eq:
        return line
    stripped = cookie_value.strip()
    quoted = len(stripped) >= 2 and stripped[0] == stripped[-1] == '"'
    if quoted:
        stripped = stripped[1:-1]
    redacted = redactor.redact_cookie(stripped)
    if quoted:
        redacted = f'"{redacted}"'
    return f"{name}={redacted}{sep}{attributes}"


def sanitize_set_cookie_header(value: str, redactor: Redactor) -> str:
    """Sanitize a response ``Set-Cookie`` header value.

    Only the cookie value changes; Domain, Path, Expires, Secure and every
    other attribute is kept byte-for-byte. Several cookies folded onto
    separate lines are handled one line at a time.

    Example:
        >>> from har_sanitizer.sanitization.redactor import Redactor, SanitizeOptions
        >>> r = Redactor.create(SanitizeOptions(cookies="obfuscate"))
        >>> sanitize_set_cookie_header("sid=abc; Path=/; Secure", r)
        'sid=obfuscated; Path=/; Secure'
    """
    return "\n".join(_sanitize_set_cookie_line(line, redactor) for line in value.split("\n"))


def sanitize_cookie_list(cookies: list[Any], redactor: Redactor) -> list[Any]:
    """Sanitize a HAR request/response ``cookies`` array.

    Returns:
        New list where every cookie object has its value redacted
    """
    result = []
    for cookie in cookies:
        if isinstance(cookie, dict) and "value" in cookie:
            cookie = {**cookie, "value": redactor.redact_cookie(str(cookie["value"]))}
        result.append(cookie)
    return result
