"""Field name classification.

Body and query-string keys are matched exactly (case-sensitive) against two
ordered lists loaded from ``sensitive.json``:

- always-sensitive names are replaced with the fixed placeholder
- token-like names are redacted with the configured token strategy
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from har_sanitizer.patterns import get_field_lists

if TYPE_CHECKING:
    from pathlib import Path


class FieldKind(enum.Enum):
    """Classification of a field name."""

    SENSITIVE = "sensitive"
    TOKEN = "token"


@dataclass(frozen=True)
class FieldClassifier:
    """Lookup over the always-sensitive and token-like field name lists."""

    always_sensitive: tuple[str, ...]
    token_like: tuple[str, ...]

    @classmethod
    def load(cls, custom_patterns: Path | str | None = None) -> FieldClassifier:
        """Build a classifier from the built-in lists plus an optional custom file.

        Raises:
            PatternLoadError: If the custom patterns file cannot be loaded
        """
        always_sensitive, token_like = get_field_lists(custom_patterns)
        return cls(always_sensitive=always_sensitive, token_like=token_like)

    def classify(self, name: str) -> FieldKind | None:
        """Classify a field name.

        Example:
            >>> DEFAULT_CLASSIFIER.classify("password")
            <FieldKind.SENSITIVE: 'sensitive'>
            >>> DEFAULT_CLASSIFIER.classify("access_token")
            <FieldKind.TOKEN: 'token'>
            >>> DEFAULT_CLASSIFIER.classify("Password") is None
            True
        """
        if name in self.always_sensitive:
            return FieldKind.SENSITIVE
        if name in self.token_like:
            return FieldKind.TOKEN
        return None


DEFAULT_CLASSIFIER = FieldClassifier.load()


def classify_field(name: str) -> FieldKind | None:
    """Classify a field name against the built-in lists."""
    return DEFAULT_CLASSIFIER.classify(name)
