"""Tests for URL query string sanitization."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from har_sanitizer.patterns import OBFUSCATED, redact_value
from har_sanitizer.sanitization.redactor import Redactor, SanitizeOptions
from har_sanitizer.sanitization.url import sanitize_query, sanitize_url


def _obfuscating() -> Redactor:
    return Redactor.create(SanitizeOptions(salt=False, cookies="obfuscate", tokens="obfuscate"))


def _hashing() -> Redactor:
    return Redactor.create(SanitizeOptions(salt=False))


# fmt: off
URL_CASES = [
    ("https://example.com/foobar?token=footoken",
     "https://example.com/foobar?token=obfuscated",                     "token"),
    ("https://example.com/cb?code=abc&state=xyz",
     "https://example.com/cb?code=obfuscated&state=xyz",                "code_keeps_state"),
    ("https://example.com/?password=p&page=2#frag",
     "https://example.com/?password=obfuscated&page=2#frag",            "fragment_kept"),
    ("https://example.com/?q=a%20b&email=a%40b.c",
     "https://example.com/?q=a%20b&email=obfuscated",                   "encoding_kept"),
    ("https://example.com/path",
     "https://example.com/path",                                        "no_query"),
    ("https://example.com/?page=1&sort=asc",
     "https://example.com/?page=1&sort=asc",                            "nothing_sensitive"),
    ("/login?next=/home&token=t",
     "/login?next=/home&token=obfuscated",                              "relative"),
    ("https://example.com/?Token=t",
     "https://example.com/?Token=t",                                    "case_sensitive"),
]
# fmt: on


class TestSanitizeUrl:
    """Tests for URL sanitization."""

    @pytest.mark.parametrize(("url", "expected", "desc"), URL_CASES, ids=[c[2] for c in URL_CASES])
    def test_sanitize_url_obfuscate(self, url: str, expected: str, desc: str) -> None:
        """Test matching parameters are replaced and everything else kept."""
        assert sanitize_url(url, _obfuscating()) == expected

    def test_token_hashed(self) -> None:
        """Test token parameters follow the token strategy."""
        result = sanitize_url("https://example.com/?access_token=abc", _hashing())
        query = parse_qs(urlsplit(result).query)
        assert query["access_token"] == [redact_value("abc", "hash")]

    def test_sensitive_param_obfuscated_under_hash(self) -> None:
        """Test always-sensitive parameters get the placeholder."""
        result = sanitize_url("https://example.com/?password=abc", _hashing())
        assert parse_qs(urlsplit(result).query)["password"] == [OBFUSCATED]

    def test_duplicate_params_each_redacted(self) -> None:
        """Test every occurrence of a sensitive parameter is redacted."""
        result = sanitize_url("https://example.com/?token=a&token=b", _obfuscating())
        assert parse_qs(urlsplit(result).query)["token"] == [OBFUSCATED, OBFUSCATED]

    def test_encoded_name_matched(self) -> None:
        """Test parameter names are decoded before matching."""
        assert sanitize_query("%74oken=abc", _obfuscating()) == "%74oken=obfuscated"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("http://[::1/x?token=abc", "http://[::1/x?token=obfuscated"),
            ("http://[::1/x?page=1&password=p#top", "http://[::1/x?page=1&password=obfuscated#top"),
            ("http://[::1/x", "http://[::1/x"),
        ],
        ids=["broken_ipv6_token", "broken_ipv6_fragment", "broken_ipv6_no_query"],
    )
    def test_unparseable_url_query_redacted(self, url: str, expected: str) -> None:
        """Test a URL urlsplit rejects still has its query redacted."""
        assert sanitize_url(url, _obfuscating()) == expected
