"""HAR entry and log sanitization.

This module sanitizes HAR (HTTP Archive) data by redacting cookies, tokens,
credentials and sensitive form fields while preserving the structure needed
to analyse the captured traffic.

Each entry is sanitized independently; one salt is shared by all entries of
a single ``sanitize_har`` call.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from har_sanitizer.sanitization.body import sanitize_body, sanitize_params
from har_sanitizer.sanitization.cookies import sanitize_cookie_list
from har_sanitizer.sanitization.fields import FieldClassifier
from har_sanitizer.sanitization.headers import sanitize_headers
from har_sanitizer.sanitization.redactor import Redactor, SanitizeOptions
from har_sanitizer.sanitization.url import sanitize_url

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER = logging.getLogger(__name__)

CREATOR_NAME = "har-sanitizer"


class EntrySanitizationError(ValueError):
    """Raised when an entry cannot be sanitized.

    The whole call fails so that no entry is ever emitted unsanitized or
    dropped from the output.
    """

    def __init__(self, index: int, cause: Exception) -> None:
        self.index = index
        self.cause = cause
        super().__init__(f"Failed to sanitize entry {index}: {type(cause).__name__}: {cause}")


def _sanitize_request(req: dict[str, Any], redactor: Redactor) -> None:
    """Sanitize a HAR request object in-place.

    Args:
        req: Copied HAR request object
        redactor: Redactor for this sanitization call
    """
    if isinstance(req.get("url"), str) and req["url"]:
        req["url"] = sanitize_url(req["url"], redactor)

    if isinstance(req.get("headers"), list):
        req["headers"] = sanitize_headers(req["headers"], redactor, "request")

    if isinstance(req.get("cookies"), list):
        req["cookies"] = sanitize_cookie_list(req["cookies"], redactor)

    # Structured copy of the URL query
    if isinstance(req.get("queryString"), list):
        req["queryString"] = sanitize_params(req["queryString"], redactor)

    post_data = req.get("postData")
    if isinstance(post_data, dict):
        post_data = sanitize_body(post_data, redactor)
        if isinstance(post_data.get("params"), list):
            post_data["params"] = sanitize_params(post_data["params"], redactor)
        req["postData"] = post_data


def _sanitize_response(resp: dict[str, Any], redactor: Redactor) -> None:
    """Sanitize a HAR response object in-place.

    Args:
        resp: Copied HAR response object
        redactor: Redactor for this sanitization call
    """
    if isinstance(resp.get("headers"), list):
        resp["headers"] = sanitize_headers(resp["headers"], redactor, "response")

    if isinstance(resp.get("cookies"), list):
        resp["cookies"] = sanitize_cookie_list(resp["cookies"], redactor)

    if isinstance(resp.get("content"), dict):
        resp["content"] = sanitize_body(resp["content"], redactor)


def sanitize_entry(entry: dict[str, Any], redactor: Redactor | None = None) -> dict[str, Any]:
    """Sanitize a single HAR entry (request/response pair).

    Timings, timestamps, cache data and the server address are copied
    unchanged.

    Args:
        entry: HAR entry object (not modified)
        redactor: Redactor for this sanitization call. A default one with a
            fresh random salt is created when omitted.

    Returns:
        Sanitized copy of the entry
    """
    if redactor is None:
        redactor = Redactor.create()

    result = copy.deepcopy(entry)

    if isinstance(result.get("request"), dict):
        _sanitize_request(result["request"], redactor)

    if isinstance(result.get("response"), dict):
        _sanitize_response(result["response"], redactor)

    return result


def sanitize_har(
    har_data: dict[str, Any],
    options: SanitizeOptions | Mapping[str, Any] | None = None,
    *,
    custom_patterns: str | Path | None = None,
) -> dict[str, Any]:
    """Sanitize an entire HAR document.

    Args:
        har_data: Parsed HAR JSON data (not modified)
        options: SanitizeOptions or a plain mapping merged over the defaults
            (``salt=True``, ``cookies="hash"``, ``tokens="hash"``). Unknown
            keys are ignored.
        custom_patterns: Optional path to a patterns JSON file extending the
            built-in field lists

    Returns:
        Sanitized HAR data with log.creator set to this library

    Raises:
        SanitizeOptionsError: If an option holds an unsupported value
        PatternLoadError: If the custom patterns file cannot be loaded
        EntrySanitizationError: If an entry fails to sanitize

    Example:
        >>> har = {"log": {"entries": []}}
        >>> sanitized = sanitize_har(har, {"salt": False})
        >>> sanitized["log"]["creator"]["name"]
        'har-sanitizer'
    """
    from har_sanitizer import __version__

    opts = options if isinstance(options, SanitizeOptions) else SanitizeOptions.from_mapping(options)
    classifier = FieldClassifier.load(custom_patterns) if custom_patterns else None
    redactor = Redactor.create(opts, classifier)

    result = copy.deepcopy(har_data)

    if not isinstance(result.get("log"), dict):
        _LOGGER.warning("HAR data missing 'log' key")
        return result

    log = result["log"]

    if isinstance(log.get("entries"), list):
        entries = []
        for i, entry in enumerate(log["entries"]):
            if not isinstance(entry, dict):
                entries.append(entry)
                continue
            try:
                entries.append(sanitize_entry(entry, redactor))
            except Exception as e:
                raise EntrySanitizationError(i, e) from e
        log["entries"] = entries
        _LOGGER.debug("Sanitized %d entries", len(entries))

    log["creator"] = {"name": CREATOR_NAME, "version": __version__}

    return result


sanitize = sanitize_har
