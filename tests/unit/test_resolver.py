"""tests/unit/test_resolver.py"""

import pytest

from liveurl.exceptions import InvalidURL
from liveurl.parser.resolver import (
    RawURL,
    parse_absolute,
    remove_dot_segments,
    resolve,
    split,
    split_host,
)

BASE = "http://a/b/c/d;p?q"


class TestSplit:
    """Tests for split function."""

    def test_full_url(self):
        """Test every component is extracted."""
        raw = split("HTTPS://user:pw@Example.com:8080/p/a?x=1#top")
        assert raw.scheme == "https"
        assert raw.username == "user"
        assert raw.password == "pw"
        assert raw.hostname == "Example.com"
        assert raw.port == "8080"
        assert raw.path == "/p/a"
        assert raw.query == "x=1"
        assert raw.fragment == "top"

    def test_absent_components_are_none(self):
        """Test missing authority, query and fragment are None."""
        raw = split("mailto:someone@example.com")
        assert raw.scheme == "mailto"
        assert raw.hostname is None
        assert raw.query is None
        assert raw.fragment is None
        assert raw.path == "someone@example.com"

    def test_empty_query_and_fragment_are_defined(self):
        """Test '?' and '#' without content are empty, not None."""
        raw = split("/x?#")
        assert raw.query == ""
        assert raw.fragment == ""

    def test_relative_reference(self):
        """Test a relative reference has no scheme."""
        raw = split("../g?y")
        assert raw.scheme == ""
        assert not raw.is_absolute
        assert raw.path == "../g"
        assert raw.query == "y"

    def test_ipv6_host(self):
        """Test bracketed IPv6 hosts keep their brackets."""
        raw = split("http://[::1]:8080/")
        assert raw.hostname == "[::1]"
        assert raw.port == "8080"

    def test_port_leading_zeros_removed(self):
        """Test ports are normalized to their integer value."""
        assert split("http://h:0080/").port == "80"

    def test_empty_port_dropped(self):
        """Test 'host:' yields no port."""
        assert split("http://h:/").port is None

    def test_surrounding_whitespace_and_tabs_removed(self):
        """Test leading/trailing C0 and space are stripped, tabs removed."""
        raw = split("  http://ex\tample.com/\n ")
        assert raw.hostname == "example.com"
        assert raw.path == "/"

    @pytest.mark.parametrize(
        "text",
        [
            "http://h:abc/",
            "http://h:65536/",
            "http://[::1/",
            "http://[::1]x/",
            "http://h/\x00x",
        ],
    )
    def test_malformed_input_rejected(self, text):
        """Test malformed authority or control characters raise InvalidURL."""
        with pytest.raises(InvalidURL):
            split(text)


@pytest.mark.parametrize(
    "ref, expected",
    [
        ("g", "http://a/b/c/g"),
        ("./g", "http://a/b/c/g"),
        ("g/", "http://a/b/c/g/"),
        ("/g", "http://a/g"),
        ("//g", "http://g/"),
        ("?y", "http://a/b/c/d;p?y"),
        ("g?y", "http://a/b/c/g?y"),
        ("#s", "http://a/b/c/d;p?q#s"),
        ("g#s", "http://a/b/c/g#s"),
        ("", "http://a/b/c/d;p?q"),
        (".", "http://a/b/c/"),
        ("./", "http://a/b/c/"),
        ("..", "http://a/b/"),
        ("../g", "http://a/b/g"),
        ("../..", "http://a/"),
        ("../../g", "http://a/g"),
        ("../../../g", "http://a/g"),
        ("/./g", "http://a/g"),
        ("g.", "http://a/b/c/g."),
        ("g..", "http://a/b/c/g.."),
        ("./g/.", "http://a/b/c/g/"),
        ("g/../h", "http://a/b/c/h"),
        ("https://other/x", "https://other/x"),
    ],
)
def test_rfc3986_reference_resolution(ref, expected):
    """Test the RFC 3986 section 5.4 examples."""
    assert parse_absolute(ref, BASE).geturl() == expected


class TestResolve:
    """Tests for resolve function."""

    def test_custom_scheme_is_merged(self):
        """Test resolution works for schemes unknown to urllib."""
        raw = parse_absolute("y", "custom://h/x/z")
        assert raw.geturl() == "custom://h/x/y"

    def test_base_without_path(self):
        """Test merging onto an authority with an empty path."""
        raw = resolve(split("foo://h"), split("x"))
        assert raw.path == "/x"

    def test_opaque_base_accepts_fragment(self):
        """Test a fragment-only reference against an opaque base."""
        raw = parse_absolute("#frag", "mailto:a@b")
        assert raw.geturl() == "mailto:a@b#frag"

    def test_opaque_base_rejects_path(self):
        """Test a path reference against an opaque base fails."""
        with pytest.raises(InvalidURL):
            parse_absolute("x", "mailto:a@b")

    def test_absolute_reference_ignores_base(self):
        """Test an absolute input replaces the base entirely."""
        raw = parse_absolute("ws://sock/", "http://a/b")
        assert raw.geturl() == "ws://sock/"


class TestParseAbsolute:
    """Tests for parse_absolute function."""

    def test_relative_without_base(self):
        """Test a relative input without a base fails."""
        with pytest.raises(InvalidURL):
            parse_absolute("/path")

    def test_relative_base(self):
        """Test a non-absolute base fails."""
        with pytest.raises(InvalidURL) as exc_info:
            parse_absolute("x", "/relative/base")
        assert exc_info.value.url == "/relative/base"

    def test_empty_base_means_no_base(self):
        """Test an empty base is treated as absent."""
        assert parse_absolute("http://a/", "").geturl() == "http://a/"

    def test_special_scheme_requires_host(self):
        """Test http without a host fails."""
        with pytest.raises(InvalidURL):
            parse_absolute("http:///path")

    def test_file_scheme_allows_empty_host(self):
        """Test file URLs may have an empty host."""
        assert parse_absolute("file:///tmp/x").geturl() == "file:///tmp/x"

    def test_file_scheme_gains_authority(self):
        """Test 'file:/x' serializes with an empty authority."""
        assert parse_absolute("file:/tmp/x").geturl() == "file:///tmp/x"

    def test_default_port_elided(self):
        """Test a port equal to the scheme default is dropped."""
        raw = parse_absolute("https://h:443/")
        assert raw.port is None
        assert raw.geturl() == "https://h/"

    def test_special_empty_path_becomes_slash(self):
        """Test special URLs with an authority get a '/' path."""
        assert parse_absolute("http://h").geturl() == "http://h/"

    def test_non_special_empty_path_kept(self):
        """Test non-special URLs keep an empty path."""
        assert parse_absolute("custom://h").geturl() == "custom://h"

    def test_dot_segments_removed(self):
        """Test dot segments are removed from hierarchical paths."""
        assert parse_absolute("http://h/a/./b/../c").path == "/a/c"

    def test_empty_query_and_fragment_normalized(self):
        """Test '?' and '#' alone serialize as absent."""
        raw = parse_absolute("http://h/p?#")
        assert raw.query == ""
        assert raw.fragment == ""
        assert raw.geturl() == "http://h/p"

    def test_empty_credentials_dropped(self):
        """Test an empty userinfo is not serialized."""
        assert parse_absolute("http://@h/").geturl() == "http://h/"

    def test_password_only(self):
        """Test a password without a username keeps the colon."""
        assert parse_absolute("http://:pw@h/").geturl() == "http://:pw@h/"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/a/b/c/./../../g", "/a/g"),
        ("/mid/content=5/../6", "/mid/6"),
        ("/..", "/"),
        ("/.", "/"),
        ("/a/..", "/"),
        ("/a/b/", "/a/b/"),
        ("/a.b/c", "/a.b/c"),
    ],
)
def test_remove_dot_segments(path, expected):
    """Test RFC 3986 dot segment removal."""
    assert remove_dot_segments(path) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("h", ("h", None)),
        ("h:81", ("h", "81")),
        ("h:", ("h", "")),
        ("[::1]:81", ("[::1]", "81")),
        ("[::1]", ("[::1]", None)),
        ("[::1", ("[::1", None)),
        ("h:x", ("h", "x")),
    ],
)
def test_split_host(value, expected):
    """Test lenient host/port splitting for setters."""
    assert split_host(value) == expected


class TestRawURL:
    """Tests for RawURL class."""

    def test_copy_is_independent(self):
        """Test copy() yields an equal but separate record."""
        raw = split("http://h/p?q")
        clone = raw.copy()
        assert clone == raw
        clone.path = "/other"
        assert raw.path == "/p"

    def test_netloc_with_credentials(self):
        """Test netloc includes userinfo and port."""
        raw = RawURL("http", "u", "p", "h", "81", "/")
        assert raw.netloc == "u:p@h:81"
        assert raw.host == "h:81"

    def test_geturl_adds_slash_after_authority(self):
        """Test a relative path is separated from the authority."""
        raw = RawURL("foo", hostname="h", path="x")
        assert raw.geturl() == "foo://h/x"

    def test_repr(self):
        """Test repr shows the serialization."""
        assert repr(split("http://h/")) == "RawURL('http://h/')"

    def test_geturl_guards_path_starting_with_double_slash(self):
        """Test a path starting with // is not mistaken for an authority."""
        raw = RawURL("custom", path="//x")
        assert raw.geturl() == "custom:/.//x"
        again = split(raw.geturl())
        assert again.hostname is None
        assert remove_dot_segments(again.path) == "//x"
