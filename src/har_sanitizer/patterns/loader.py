"""Loading of the sensitive field name lists.

The packaged ``sensitive.json`` holds the built-in lists. A user pattern file
in the same ``{"fields": {"always_sensitive": [...], "token_like": [...]}}``
format may add names to either list.
"""

from __future__ import annotations

import json
import logging
from collections import OrderedDict
from pathlib import Path
from typing import Any

_LOGGER = logging.getLogger(__name__)

FIELD_LISTS = ("always_sensitive", "token_like")

BUILTIN_PATTERNS = Path(__file__).with_name("sensitive.json")

# Merged lists kept per custom file; bounded so long-lived processes don't grow
_MAX_CACHE_SIZE = 20


class PatternLoadError(Exception):
    """Raised when a pattern file cannot be read or has the wrong shape."""


class _LruCache:
    """Least-recently-used mapping from cache key to loaded patterns."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._data: OrderedDict[str, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        self._data.move_to_end(key)
        return self._data[key]

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._data.move_to_end(key)
        while len(self._data) > self.max_size:
            evicted, _ = self._data.popitem(last=False)
            _LOGGER.debug("Pattern cache evicted: %s", evicted)

    def clear(self) -> None:
        self._data.clear()


_cache = _LruCache(_MAX_CACHE_SIZE)


def load_json_file(path: Path | str) -> dict[str, Any]:
    """Read a pattern file that must hold a JSON object.

    Raises:
        PatternLoadError: If the file cannot be read, is not JSON, or is not an object
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise PatternLoadError(f"Pattern file not found: {path}") from e
    except PermissionError as e:
        raise PatternLoadError(f"Permission denied reading pattern file: {path}") from e
    except OSError as e:
        raise PatternLoadError(f"Cannot read pattern file {path}: {e.strerror}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PatternLoadError(f"Invalid JSON in pattern file {path}: {e}") from e

    if not isinstance(data, dict):
        raise PatternLoadError(f"Pattern file must contain a JSON object: {path}")
    return data


def _custom_names(custom: dict[str, Any], path: Path | str) -> dict[str, list[str]]:
    """Extract and check the extra names of a custom pattern file."""
    fields = custom.get("fields", {})
    if not isinstance(fields, dict):
        raise PatternLoadError(f"'fields' must be an object in {path}")

    extra: dict[str, list[str]] = {}
    for list_name in FIELD_LISTS:
        names = fields.get(list_name, [])
        if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
            raise PatternLoadError(f"'fields.{list_name}' must be an array of strings in {path}")
        extra[list_name] = names
    return extra


def load_sensitive_patterns(custom_path: Path | str | None = None) -> dict[str, Any]:
    """Load the sensitive field lists, merged with an optional custom file.

    Names already present keep their position; new names are appended in
    file order. Results are cached per resolved custom path.

    Returns:
        Dict with a 'fields' key holding both lists

    Raises:
        PatternLoadError: If the built-in or custom file cannot be loaded
    """
    cache_key = str(Path(custom_path).resolve()) if custom_path else "<builtin>"
    cached = _cache.get(cache_key)
    if cached is not None:
        return cached

    patterns = load_json_file(BUILTIN_PATTERNS)

    if custom_path:
        for list_name, names in _custom_names(load_json_file(custom_path), custom_path).items():
            target = patterns["fields"][list_name]
            target.extend(name for name in dict.fromkeys(names) if name not in target)
        _LOGGER.debug("Merged custom patterns from %s", custom_path)

    _cache.set(cache_key, patterns)
    return patterns


def get_field_lists(custom_path: Path | str | None = None) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Get the (always_sensitive, token_like) field name lists.

    Returns:
        Two tuples preserving the order the names were declared in
    """
    fields = load_sensitive_patterns(custom_path)["fields"]
    return tuple(fields["always_sensitive"]), tuple(fields["token_like"])


def clear_pattern_cache() -> None:
    """Forget every loaded pattern file, e.g. after editing one."""
    _cache.clear()
