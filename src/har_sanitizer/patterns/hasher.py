"""Salted hasher for correlation-preserving redaction.

This module provides the Hasher class which turns sensitive values into
either a salted SHA-256 digest or the fixed ``obfuscated`` placeholder.
Equal inputs hashed with the same salt always give the same digest, so
analysts can correlate redacted values within one sanitized log without
learning the originals.
"""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass, field
from typing import Literal

Strategy = Literal["hash", "obfuscate"]

STRATEGIES: tuple[Strategy, ...] = ("hash", "obfuscate")

OBFUSCATED = "obfuscated"

# 20 random bytes, hex-encoded to 40 characters
SALT_BYTES = 20


def generate_salt() -> str:
    """Generate a fresh random salt for one sanitization call."""
    return secrets.token_hex(SALT_BYTES)


def sha256_hex(value: str, salt: str = "") -> str:
    """Hex SHA-256 digest of ``value`` followed by ``salt``."""
    return hashlib.sha256(f"{value}{salt}".encode()).hexdigest()


def redact_value(value: str, strategy: Strategy, salt: str = "") -> str:
    """Produce the redacted replacement for a scalar value.

    Args:
        value: The original sensitive value
        strategy: "obfuscate" for the fixed placeholder, "hash" for a digest
        salt: Salt appended to the value before hashing

    Returns:
        "obfuscated" or a 64-character hex digest

    Example:
        >>> redact_value("secret", "obfuscate")
        'obfuscated'
        >>> len(redact_value("secret", "hash"))
        64
    """
    if strategy == "obfuscate":
        return OBFUSCATED
    return sha256_hex(value, salt)


@dataclass
class Hasher:
    """Salted hasher shared by every redaction in one sanitization call.

    Attributes:
        salt: The salt appended to values before hashing. Empty when salting
            is disabled.
        _cache: Internal cache mapping original values to their digests.
    """

    salt: str = ""
    _cache: dict[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, salt: bool | str = True) -> Hasher:
        """Create a new hasher with the specified salt.

        Args:
            salt: Salt for hashing. Options:
                - True: Generate a random salt (default)
                - False: No salt, equal values always hash identically
                - Any string: Use as salt for consistent hashing across calls

        Returns:
            Configured Hasher instance
        """
        if salt is True:
            return cls(salt=generate_salt())
        if salt is False:
            return cls(salt="")
        return cls(salt=salt)

    def hash_value(self, value: str) -> str:
        """Hash a value with this hasher's salt.

        Args:
            value: The original sensitive value

        Returns:
            Hex SHA-256 digest
        """
        if value in self._cache:
            return self._cache[value]

        result = sha256_hex(value, self.salt)
        self._cache[value] = result
        return result

    def redact(self, value: str, strategy: Strategy) -> str:
        """Redact a value using the given strategy."""
        if strategy == "obfuscate":
            return OBFUSCATED
        return self.hash_value(value)
