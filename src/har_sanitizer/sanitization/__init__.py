"""Sanitization utilities for HAR files.

This module redacts cookies, tokens, credentials and sensitive form fields
from HAR data with ZERO external dependencies (stdlib only).

Exports:
    - sanitize_har / sanitize: Sanitize a parsed HAR document
    - sanitize_har_file: Sanitize a HAR file on disk
    - sanitize_entry: Sanitize a single request/response entry
    - SanitizeOptions: Salt and strategy settings for one call
"""

from __future__ import annotations

from har_sanitizer.sanitization.body import (
    BodyDecodeError,
    BodyKind,
    classify_body,
    decode_body,
    encode_body,
    is_body_sanitizable,
    sanitize_body,
)
from har_sanitizer.sanitization.cookies import (
    sanitize_cookie_header,
    sanitize_cookie_list,
    sanitize_set_cookie_header,
)
from har_sanitizer.sanitization.fields import (
    DEFAULT_CLASSIFIER,
    FieldClassifier,
    FieldKind,
    classify_field,
)
from har_sanitizer.sanitization.files import (
    DEFAULT_MAX_HAR_SIZE,
    HarSizeError,
    default_output_path,
    read_har_file,
    sanitize_har_file,
)
from har_sanitizer.sanitization.har import (
    EntrySanitizationError,
    sanitize,
    sanitize_entry,
    sanitize_har,
)
from har_sanitizer.sanitization.headers import (
    sanitize_authorization_header,
    sanitize_header_value,
    sanitize_headers,
)
from har_sanitizer.sanitization.redactor import (
    Redactor,
    SanitizeOptions,
    SanitizeOptionsError,
)
from har_sanitizer.sanitization.url import sanitize_url
from har_sanitizer.sanitization.validation import HarValidationError, validate_har_structure

__all__ = [
    # HAR sanitization
    "sanitize",
    "sanitize_har",
    "sanitize_har_file",
    "read_har_file",
    "default_output_path",
    "sanitize_entry",
    "validate_har_structure",
    # Options
    "SanitizeOptions",
    "SanitizeOptionsError",
    "Redactor",
    # Field classification
    "FieldKind",
    "FieldClassifier",
    "DEFAULT_CLASSIFIER",
    "classify_field",
    # Codecs
    "BodyKind",
    "BodyDecodeError",
    "classify_body",
    "decode_body",
    "encode_body",
    "is_body_sanitizable",
    "sanitize_body",
    "sanitize_cookie_header",
    "sanitize_set_cookie_header",
    "sanitize_cookie_list",
    "sanitize_url",
    "sanitize_authorization_header",
    "sanitize_header_value",
    "sanitize_headers",
    # Size limits and errors
    "DEFAULT_MAX_HAR_SIZE",
    "EntrySanitizationError",
    "HarSizeError",
    "HarValidationError",
]
