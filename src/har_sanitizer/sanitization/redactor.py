"""Sanitization options and the per-call redactor.

A :class:`Redactor` binds the options of one ``sanitize_har`` call to the
salted :class:`~har_sanitizer.patterns.Hasher` and the field classifier. It
is passed down to every codec.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from har_sanitizer.patterns import OBFUSCATED, STRATEGIES, Hasher, Strategy
from har_sanitizer.sanitization.fields import DEFAULT_CLASSIFIER, FieldClassifier, FieldKind


class SanitizeOptionsError(ValueError):
    """Raised when sanitize options hold an unsupported value."""


@dataclass(frozen=True)
class SanitizeOptions:
    """Options for one sanitization call.

    Attributes:
        salt: True for a fresh random salt per call, False for no salt, or a
            string to use as a fixed salt.
        cookies: Strategy for cookie values ("hash" or "obfuscate").
        tokens: Strategy for token-like fields, URL tokens and the
            Authorization credential ("hash" or "obfuscate").
    """

    salt: bool | str = True
    cookies: Strategy = "hash"
    tokens: Strategy = "hash"

    def __post_init__(self) -> None:
        if not isinstance(self.salt, (bool, str)):
            raise SanitizeOptionsError(f"salt must be a bool or a string, got {type(self.salt).__name__}")
        for name in ("cookies", "tokens"):
            value = getattr(self, name)
            if value not in STRATEGIES:
                raise SanitizeOptionsError(
                    f"{name} must be one of {', '.join(STRATEGIES)}, got {value!r}"
                )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> SanitizeOptions:
        """Merge a plain mapping over the defaults.

        Unrecognized keys are ignored.

        Example:
            >>> SanitizeOptions.from_mapping({"tokens": "obfuscate", "color": "red"})
            SanitizeOptions(salt=True, cookies='hash', tokens='obfuscate')
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})


def _as_text(value: Any) -> str:
    """Text form of a decoded field value, used as the hash input."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@dataclass
class Redactor:
    """Applies the configured strategies with one shared salt."""

    hasher: Hasher
    cookies: Strategy = "hash"
    tokens: Strategy = "hash"
    classifier: FieldClassifier = DEFAULT_CLASSIFIER

    @classmethod
    def create(
        cls,
        options: SanitizeOptions | None = None,
        classifier: FieldClassifier | None = None,
    ) -> Redactor:
        """Create a redactor, generating the salt for this call."""
        opts = options or SanitizeOptions()
        return cls(
            hasher=Hasher.create(opts.salt),
            cookies=opts.cookies,
            tokens=opts.tokens,
            classifier=classifier or DEFAULT_CLASSIFIER,
        )

    @property
    def salt(self) -> str:
        return self.hasher.salt

    def redact_cookie(self, value: str) -> str:
        return self.hasher.redact(value, self.cookies)

    def redact_token(self, value: Any) -> str:
        return self.hasher.redact(_as_text(value), self.tokens)

    def redact_field(self, name: str, value: Any) -> str | None:
        """Redact a named field, or return None when the name is not sensitive."""
        kind = self.classifier.classify(name)
        if kind is FieldKind.SENSITIVE:
            return OBFUSCATED
        if kind is FieldKind.TOKEN:
            return self.redact_token(value)
        return None
