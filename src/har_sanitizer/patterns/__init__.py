"""Pattern loading and hashing utilities for sanitization.

This module provides:
- Loading of sensitive field lists from JSON
- Salted hash generation for correlation-preserving redaction
- Pattern merging for custom user patterns
"""

from __future__ import annotations

from har_sanitizer.patterns.hasher import (
    OBFUSCATED,
    STRATEGIES,
    Hasher,
    Strategy,
    generate_salt,
    redact_value,
)
from har_sanitizer.patterns.loader import (
    PatternLoadError,
    clear_pattern_cache,
    get_field_lists,
    load_sensitive_patterns,
)

__all__ = [
    # Pattern loading
    "load_sensitive_patterns",
    "get_field_lists",
    "clear_pattern_cache",
    "PatternLoadError",
    # Hashing
    "Hasher",
    "Strategy",
    "STRATEGIES",
    "OBFUSCATED",
    "generate_salt",
    "redact_value",
]
