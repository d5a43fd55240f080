"""HAR structure checks.

The sanitizer only rewrites parts of an entry whose shape it recognizes and
copies everything else through unchanged. :func:`validate_har_structure`
reports those places, so unredacted data can be found before a file is shared.

Warnings are prefixed with a JSON path, e.g.
``$.log.entries[2].request.headers[0]: ...``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

UNSANITIZED = "not a recognized shape, copied unsanitized"


class HarValidationError(ValueError):
    """Raised when a document is not a HAR log at all."""

    def __init__(self, message: str, path: str = "$") -> None:
        self.path = path
        super().__init__(f"Invalid HAR structure at {path}: {message}")


def _is_header(item: Any) -> bool:
    return isinstance(item, dict) and isinstance(item.get("name"), str) and isinstance(item.get("value"), str)


def _is_cookie(item: Any) -> bool:
    return isinstance(item, dict) and "value" in item


def _is_param(item: Any) -> bool:
    return isinstance(item, dict) and isinstance(item.get("name"), str)


# Name/value arrays the sanitizer walks, with the item shape it redacts
_PAIR_ARRAYS: dict[str, dict[str, Callable[[Any], bool]]] = {
    "request": {"headers": _is_header, "cookies": _is_cookie, "queryString": _is_param},
    "response": {"headers": _is_header, "cookies": _is_cookie},
}

_BODY_KEYS = {"request": "postData", "response": "content"}

# HAR 1.2 fields only checked in strict mode
_REQUIRED_FIELDS = {"request": ("method", "url"), "response": ("status", "content")}


def _check_pairs(items: Any, path: str, is_valid: Callable[[Any], bool], warnings: list[str]) -> None:
    if not isinstance(items, list):
        warnings.append(f"{path}: not an array, copied unsanitized")
        return
    for i, item in enumerate(items):
        if not is_valid(item):
            warnings.append(f"{path}[{i}]: {UNSANITIZED}")


def _check_body(body: Any, path: str, warnings: list[str]) -> None:
    if not isinstance(body, dict):
        warnings.append(f"{path}: not an object, copied unsanitized")
        return
    params = body.get("params")
    if params is not None:
        _check_pairs(params, f"{path}.params", _is_param, warnings)


def _check_message(side: str, message: Any, path: str, strict: bool, warnings: list[str]) -> None:
    if not isinstance(message, dict):
        warnings.append(f"{path}: not an object, copied unsanitized")
        return

    if strict:
        for name in _REQUIRED_FIELDS[side]:
            if name not in message:
                warnings.append(f"{path}: missing '{name}'")

    if side == "request" and "url" in message and not isinstance(message["url"], str):
        warnings.append(f"{path}.url: not a string, copied unsanitized")

    for key, is_valid in _PAIR_ARRAYS[side].items():
        if key in message:
            _check_pairs(message[key], f"{path}.{key}", is_valid, warnings)

    body_key = _BODY_KEYS[side]
    if body_key in message:
        _check_body(message[body_key], f"{path}.{body_key}", warnings)


def validate_har_structure(har_data: Any, *, strict: bool = False) -> list[str]:
    """Check a parsed HAR document for parts the sanitizer cannot redact.

    Args:
        har_data: Parsed HAR data
        strict: Also require the HAR 1.2 fields ``log.version``,
            ``log.creator``, ``request.method``, ``request.url``,
            ``response.status`` and ``response.content``

    Returns:
        List of warnings (empty if every entry has a recognized shape)

    Raises:
        HarValidationError: If there is no ``log`` object with an ``entries`` array

    Example:
        >>> validate_har_structure({"log": {"entries": [{"request": {"headers": {}}}]}})
        ['$.log.entries[0].request.headers: not an array, copied unsanitized']
    """
    if not isinstance(har_data, dict):
        raise HarValidationError("document is not an object")
    if "log" not in har_data:
        raise HarValidationError("missing 'log'")

    log = har_data["log"]
    if not isinstance(log, dict):
        raise HarValidationError("'log' is not an object", "$.log")
    if "entries" not in log:
        raise HarValidationError("missing 'entries'", "$.log")
    if not isinstance(log["entries"], list):
        raise HarValidationError("'entries' is not an array", "$.log.entries")

    warnings: list[str] = []

    if strict:
        for name in ("version", "creator"):
            if name not in log:
                warnings.append(f"$.log: missing '{name}'")

    for i, entry in enumerate(log["entries"]):
        path = f"$.log.entries[{i}]"
        if not isinstance(entry, dict):
            warnings.append(f"{path}: {UNSANITIZED}")
            continue
        for side in ("request", "response"):
            if side in entry:
                _check_message(side, entry[side], f"{path}.{side}", strict, warnings)
            elif strict:
                warnings.append(f"{path}: missing '{side}'")

    return warnings
