"""Table-driven tests for the Hasher class and redact_value."""

from __future__ import annotations

import hashlib

import pytest

from har_sanitizer.patterns.hasher import OBFUSCATED, Hasher, generate_salt, redact_value, sha256_hex

# ┌─────────────────────────────────────────────────────────────────────────────┐
# │ Hasher.create() test cases                                                  │
# ├──────────────┬─────────────────────┬────────────────────────────────────────┤
# │ salt_input   │ expected_salt       │ description                            │
# ├──────────────┼─────────────────────┼────────────────────────────────────────┤
# │ True         │ 40 random hex chars │ generates random salt                  │
# │ False        │ ""                  │ salting disabled                       │
# │ "my-salt"    │ "my-salt"           │ injected salt preserved                │
# │ ""           │ ""                  │ empty string is valid salt             │
# └──────────────┴─────────────────────┴────────────────────────────────────────┘
#
# fmt: off
CREATE_CASES = [
    (True,       "random_hex", "random_salt"),
    (False,      "",           "salt_disabled"),
    ("my-salt",  "my-salt",    "custom_salt"),
    ("",         "",           "empty_string_salt"),
]
# fmt: on


@pytest.mark.parametrize(("salt_input", "expected", "desc"), CREATE_CASES, ids=[c[2] for c in CREATE_CASES])
def test_hasher_create(salt_input: bool | str, expected: str, desc: str) -> None:
    """Test Hasher.create() with various salt options."""
    hasher = Hasher.create(salt=salt_input)

    if expected == "random_hex":
        assert len(hasher.salt) == 40  # 20 bytes = 40 hex chars
        assert all(c in "0123456789abcdef" for c in hasher.salt)
    else:
        assert hasher.salt == expected


class TestRedactValue:
    """Tests for the value transformer."""

    def test_obfuscate_ignores_input(self) -> None:
        """Test obfuscate returns the placeholder for any value."""
        assert redact_value("secret", "obfuscate") == OBFUSCATED
        assert redact_value("", "obfuscate", "salt") == OBFUSCATED

    def test_obfuscate_is_idempotent(self) -> None:
        """Test redacting the placeholder again yields the placeholder."""
        assert redact_value(redact_value("x", "obfuscate"), "obfuscate") == OBFUSCATED

    def test_hash_is_sha256_of_value_then_salt(self) -> None:
        """Test digest input is value concatenated with salt."""
        expected = hashlib.sha256(b"secretpepper").hexdigest()
        assert redact_value("secret", "hash", "pepper") == expected

    def test_hash_without_salt(self) -> None:
        """Test empty salt hashes the bare value."""
        assert redact_value("secret", "hash") == hashlib.sha256(b"secret").hexdigest()

    def test_hash_is_deterministic(self) -> None:
        """Test equal value and salt give equal digests."""
        assert redact_value("abc", "hash", "s") == redact_value("abc", "hash", "s")

    def test_hash_depends_on_salt(self) -> None:
        """Test different salts give different digests."""
        assert redact_value("abc", "hash", "s1") != redact_value("abc", "hash", "s2")

    def test_hash_is_64_hex_chars(self) -> None:
        """Test digest format."""
        digest = sha256_hex("abc")
        assert len(digest) == 64
        assert all(c in "0123456789abcdef" for c in digest)


class TestHasher:
    """Tests for Hasher instances."""

    def test_redact_hash_matches_function(self) -> None:
        """Test Hasher.redact agrees with redact_value."""
        hasher = Hasher(salt="pepper")
        assert hasher.redact("secret", "hash") == redact_value("secret", "hash", "pepper")

    def test_redact_obfuscate(self) -> None:
        """Test Hasher.redact with obfuscate strategy."""
        assert Hasher(salt="pepper").redact("secret", "obfuscate") == OBFUSCATED

    def test_hash_value_cached(self) -> None:
        """Test repeated values are served from the cache."""
        hasher = Hasher(salt="pepper")
        first = hasher.hash_value("secret")
        assert hasher._cache["secret"] == first
        assert hasher.hash_value("secret") == first

    def test_random_salts_differ(self) -> None:
        """Test two generated salts are different."""
        assert generate_salt() != generate_salt()

    def test_salt_not_in_repr(self) -> None:
        """Test cache is hidden from repr."""
        assert "_cache" not in repr(Hasher(salt="x"))
