"""
Tests for canonical URL construction.

Tests key canonicalization features including:
- Bare ports, hosts and host:port pairs
- Default filling and case folding
- Rejected shapes and out-of-range ports
"""

import pytest

from repro.exceptions import InvalidRouteError
from repro.url import canonicalize_url, format_url, normalize_port

DEFAULTS = ("http", "127.0.0.1", "80")

# =============================================================================
# Test canonicalize_url()
# =============================================================================


@pytest.mark.unit
class TestCanonicalizeUrl:
    """Test canonicalize_url() with valid input."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("8080", "http://127.0.0.1:8080"),
            ("0", "http://127.0.0.1:0"),
            ("65535", "http://127.0.0.1:65535"),
            ("api.example.com", "http://api.example.com:80"),
            ("api.example.com:8080", "http://api.example.com:8080"),
            ("10.0.0.1", "http://10.0.0.1:80"),
            ("10.0.0.1:3000", "http://10.0.0.1:3000"),
            ("localhost", "http://localhost:80"),
            ("example.com.", "http://example.com.:80"),
        ],
    )
    def test_shapes(self, raw, expected):
        assert canonicalize_url(raw, *DEFAULTS) == expected

    def test_int_is_port(self):
        assert canonicalize_url(8080, *DEFAULTS) == "http://127.0.0.1:8080"

    def test_host_is_lowercased(self):
        assert canonicalize_url("API.Example.COM:81", *DEFAULTS) == (
            "http://api.example.com:81"
        )

    def test_scheme_is_lowercased(self):
        assert canonicalize_url("a.com", "HTTPS", "127.0.0.1", "443") == (
            "https://a.com:443"
        )

    def test_defaults_fill_missing_parts(self):
        assert canonicalize_url("9000", "ws", "backend.local", "81") == (
            "ws://backend.local:9000"
        )
        assert canonicalize_url("a.com", "ws", "backend.local", "81") == (
            "ws://a.com:81"
        )

    def test_leading_zeros_normalized(self):
        assert canonicalize_url("0080", *DEFAULTS) == "http://127.0.0.1:80"

    def test_default_port_normalized(self):
        assert canonicalize_url("a.com", "http", "127.0.0.1", "0080") == (
            canonicalize_url("a.com:0080", "http", "127.0.0.1", "0080")
        )
        assert canonicalize_url("a.com", "http", "127.0.0.1", 443) == (
            "http://a.com:443"
        )


@pytest.mark.unit
class TestCanonicalizeUrlErrors:
    """Test canonicalize_url() with invalid input."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not a valid route!!",
            "http://a.com",
            "a.com/path",
            "a.com?q=1",
            "a.com#frag",
            "user@a.com",
            "a.com:",
            "a.com\n",
            " a.com",
            "[::1]:80",
            "-1",
        ],
    )
    def test_rejected_shapes(self, raw):
        with pytest.raises(InvalidRouteError, match="expected a port"):
            canonicalize_url(raw, *DEFAULTS)

    @pytest.mark.parametrize("raw", ["65536", "99999", "a.com:70000"])
    def test_port_out_of_range(self, raw):
        with pytest.raises(InvalidRouteError, match="out of range") as exc_info:
            canonicalize_url(raw, *DEFAULTS)
        assert exc_info.value.context == {"route": raw}

    @pytest.mark.parametrize("raw", [None, True, 3.5, ["80"], {"a": 1}])
    def test_non_text_rejected(self, raw):
        with pytest.raises(InvalidRouteError, match="must be a string"):
            canonicalize_url(raw, *DEFAULTS)

    @pytest.mark.parametrize("port", ["99999", "65536", "eighty", ""])
    def test_invalid_default_port(self, port):
        with pytest.raises(InvalidRouteError):
            canonicalize_url("a.com", "http", "127.0.0.1", port)

    def test_invalid_default_port_unused_for_explicit_port(self):
        assert canonicalize_url("a.com:81", "http", "127.0.0.1", "99999") == (
            "http://a.com:81"
        )


# =============================================================================
# Test normalize_port()
# =============================================================================


@pytest.mark.unit
class TestNormalizePort:
    """Test normalize_port()."""

    @pytest.mark.parametrize(
        "port,expected",
        [("80", "80"), ("0080", "80"), ("0", "0"), ("000", "0"), (8080, "8080")],
    )
    def test_valid(self, port, expected):
        assert normalize_port(port) == expected

    def test_upper_bound(self):
        assert normalize_port("65535") == "65535"
        with pytest.raises(InvalidRouteError, match="out of range"):
            normalize_port("65536")

    @pytest.mark.parametrize("port", ["-1", "80a", " 80", "", None, True])
    def test_not_a_port(self, port):
        with pytest.raises(InvalidRouteError, match="expected a port"):
            normalize_port(port)


# =============================================================================
# Test format_url()
# =============================================================================


@pytest.mark.unit
class TestFormatUrl:
    """Test the empty-string sentinel form."""

    def test_valid(self):
        assert format_url("api.example.com", *DEFAULTS) == "http://api.example.com:80"

    @pytest.mark.parametrize("raw", ["bad route!", "65536", None, ""])
    def test_invalid_returns_empty(self, raw):
        assert format_url(raw, *DEFAULTS) == ""
