"""Request and response body sanitization.

Bodies are HAR ``postData`` or ``content`` objects. Only JSON objects and
``application/x-www-form-urlencoded`` text can be decoded into fields; any
other body has its whole ``text`` replaced with the placeholder.
"""

from __future__ import annotations

import enum
import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, urlencode

from har_sanitizer.patterns import OBFUSCATED

if TYPE_CHECKING:
    from har_sanitizer.sanitization.redactor import Redactor

_LOGGER = logging.getLogger(__name__)


class BodyKind(enum.Enum):
    """Body encodings the codec understands."""

    JSON = "json"
    FORM_URLENCODED = "form"
    UNSUPPORTED = "unsupported"


class BodyDecodeError(ValueError):
    """Raised when a body cannot be decoded into a field mapping."""


def media_type(mime_type: str | None) -> str:
    """Return the lowercased ``type/subtype`` pair without parameters.

    Example:
        >>> media_type("Application/JSON; charset=utf-8")
        'application/json'
    """
    if not mime_type:
        return ""
    return mime_type.split(";", 1)[0].strip().lower()


def classify_body(mime_type: str | None) -> BodyKind:
    """Classify a body by its declared content type.

    Example:
        >>> classify_body("application/x-www-form-urlencoded")
        <BodyKind.FORM_URLENCODED: 'form'>
        >>> classify_body("text/plain")
        <BodyKind.UNSUPPORTED: 'unsupported'>
    """
    media = media_type(mime_type)
    if media in ("application/json", "text/json") or media.endswith("+json"):
        return BodyKind.JSON
    if media == "application/x-www-form-urlencoded":
        return BodyKind.FORM_URLENCODED
    return BodyKind.UNSUPPORTED


def decode_body(body: dict[str, Any]) -> dict[str, Any]:
    """Decode a body's text into a field mapping.

    Args:
        body: HAR postData or content object

    Returns:
        Mapping of field name to value. For forms, later duplicate keys
        overwrite earlier ones.

    Raises:
        BodyDecodeError: If the type is unsupported or the text does not parse
    """
    kind = classify_body(body.get("mimeType"))
    text = body.get("text") or ""

    if kind is BodyKind.JSON:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise BodyDecodeError(f"Invalid JSON body: {e.msg}") from e
        if not isinstance(data, dict):
            raise BodyDecodeError("JSON body is not an object")
        return data

    if kind is BodyKind.FORM_URLENCODED:
        return dict(parse_qsl(text, keep_blank_values=True))

    raise BodyDecodeError(f"Unsupported body type: {body.get('mimeType')!r}")


def encode_body(body: dict[str, Any], fields: dict[str, Any]) -> str:
    """Encode a field mapping back to text in the body's declared encoding.

    Raises:
        BodyDecodeError: If the body type is unsupported
    """
    kind = classify_body(body.get("mimeType"))
    if kind is BodyKind.JSON:
        return json.dumps(fields, ensure_ascii=False)
    if kind is BodyKind.FORM_URLENCODED:
        return urlencode(fields)
    raise BodyDecodeError(f"Unsupported body type: {body.get('mimeType')!r}")


def is_body_sanitizable(body: dict[str, Any]) -> bool:
    """Check whether a body can be decoded into fields.

    True only for non-empty JSON-object or form-encoded text that parses.
    Transfer-encoded text (``encoding`` set, e.g. base64) is never decoded.
    """
    text = body.get("text")
    if not isinstance(text, str) or not text:
        return False
    if body.get("encoding"):
        return False
    try:
        decode_body(body)
    except BodyDecodeError as e:
        if classify_body(body.get("mimeType")) is BodyKind.JSON:
            _LOGGER.warning("Body declared as JSON could not be parsed: %s", e)
        return False
    return True


def sanitize_body(body: dict[str, Any], redactor: Redactor) -> dict[str, Any]:
    """Sanitize a HAR postData or content object.

    Sensitive and token-like fields are redacted and the body re-encoded;
    all other fields keep their values. A body that cannot be decoded has its
    entire text replaced with the placeholder. Size, encoding and other
    metadata are kept.

    Args:
        body: HAR postData or content object
        redactor: Redactor for this sanitization call

    Returns:
        New body object
    """
    result = dict(body)
    if result.get("text") is None:
        return result

    if not is_body_sanitizable(body):
        _LOGGER.debug("Replacing body text of type %r with placeholder", body.get("mimeType"))
        result["text"] = OBFUSCATED
        return result

    fields = decode_body(body)
    for name, value in fields.items():
        redacted = redactor.redact_field(name, value)
        if redacted is not None:
            fields[name] = redacted
    result["text"] = encode_body(body, fields)
    return result


def sanitize_params(params: list[Any], redactor: Redactor) -> list[Any]:
    """Sanitize a HAR name/value array (postData.params, queryString).

    Returns:
        New list with sensitive values redacted
    """
    result = []
    for param in params:
        if isinstance(param, dict) and "name" in param:
            redacted = redactor.redact_field(param["name"], param.get("value", ""))
            if redacted is not None:
                param = {**param, "value": redacted}
        result.append(param)
    return result
