"""Reading and writing HAR files around :func:`sanitize_har`."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from har_sanitizer.sanitization.har import sanitize_har
from har_sanitizer.sanitization.redactor import SanitizeOptions
from har_sanitizer.sanitization.validation import validate_har_structure

_LOGGER = logging.getLogger(__name__)

# Default maximum HAR file size (100 MB)
DEFAULT_MAX_HAR_SIZE = 100 * 1024 * 1024

SANITIZED_SUFFIX = ".sanitized.har"


class HarSizeError(ValueError):
    """Raised when a HAR file is larger than the configured limit."""

    def __init__(self, path: str | Path, size: int, max_size: int) -> None:
        self.path = Path(path)
        self.size = size
        self.max_size = max_size
        super().__init__(f"{self.path} is {size:,} bytes, over the {max_size:,} byte limit")


def default_output_path(input_path: str | Path) -> Path:
    """Place the sanitized copy next to the input.

    Example:
        >>> default_output_path("captures/login.har").name
        'login.sanitized.har'
        >>> default_output_path("dump.json").name
        'dump.json.sanitized.har'
    """
    input_path = Path(input_path)
    if input_path.suffix == ".har":
        return input_path.with_name(input_path.stem + SANITIZED_SUFFIX)
    return input_path.with_name(input_path.name + SANITIZED_SUFFIX)


def read_har_file(path: str | Path, *, max_size: int | None = DEFAULT_MAX_HAR_SIZE) -> Any:
    """Load a HAR file, refusing files above ``max_size`` bytes.

    Raises:
        HarSizeError: If the file is larger than ``max_size``
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    if max_size is not None:
        size = path.stat().st_size
        if size > max_size:
            raise HarSizeError(path, size, max_size)
    return json.loads(path.read_text(encoding="utf-8"))


def sanitize_har_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    options: SanitizeOptions | Mapping[str, Any] | None = None,
    custom_patterns: str | Path | None = None,
    max_size: int | None = DEFAULT_MAX_HAR_SIZE,
    validate: bool = True,
) -> str:
    """Sanitize a HAR file and write the result to a new file.

    Args:
        input_path: Path to input HAR file
        output_path: Path to output file (default: ``<name>.sanitized.har``
            next to the input)
        options: Sanitize options (see sanitize_har)
        custom_patterns: Optional path to custom patterns JSON file
        max_size: Maximum file size in bytes (default: 100MB). None disables the check.
        validate: Check the structure first and log a warning for every part
            that will be copied unsanitized

    Returns:
        Path to the sanitized file

    Raises:
        HarSizeError: If file exceeds max_size limit
        HarValidationError: If the document has no log entries (when validate=True)
        FileNotFoundError: If input file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
    """
    har_data = read_har_file(input_path, max_size=max_size)

    if validate:
        for warning in validate_har_structure(har_data):
            _LOGGER.warning("HAR validation: %s", warning)

    sanitized = sanitize_har(har_data, options, custom_patterns=custom_patterns)

    target = Path(output_path) if output_path is not None else default_output_path(input_path)
    target.write_text(json.dumps(sanitized, indent=2, ensure_ascii=False), encoding="utf-8")

    _LOGGER.info("Sanitized HAR written to: %s", target)
    return str(target)
