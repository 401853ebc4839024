"""src/liveurl/parser/resolver.py

Generic absolute-URL resolution primitive for LiveURL.

Splitting is delegated to :func:`urllib.parse.urlsplit`. Reference
resolution follows RFC 3986 section 5.2 for every scheme; the standard
library's ``urljoin`` only merges schemes listed in ``uses_relative`` and
would silently drop the base of a custom scheme.
"""

from typing import List, Optional, Tuple
from urllib.parse import urlsplit

from liveurl.exceptions import InvalidURL
from liveurl.utils.logging import get_logger
from liveurl.utils.validators import (
    C0_CONTROL_OR_SPACE,
    default_port,
    has_control_character,
    is_special_scheme,
    is_valid_port,
)

__all__ = [
    "RawURL",
    "split",
    "split_host",
    "resolve",
    "parse_absolute",
    "remove_dot_segments",
]

logger = get_logger(__name__)

# pylint: disable=too-many-instance-attributes


class RawURL:
    """
    Structured breakdown of a URL reference.

    ``None`` marks a component that is absent from the reference, which
    matters during resolution: a reference with an empty query (``"?"``)
    replaces the base query, one without a query inherits it. ``hostname``
    is ``None`` when the reference has no authority at all.
    """

    __slots__ = (
        "scheme",
        "username",
        "password",
        "hostname",
        "port",
        "path",
        "query",
        "fragment",
    )

    def __init__(
        self,
        scheme: str = "",
        username: Optional[str] = None,
        password: Optional[str] = None,
        hostname: Optional[str] = None,
        port: Optional[str] = None,
        path: str = "",
        query: Optional[str] = None,
        fragment: Optional[str] = None,
    ) -> None:
        self.scheme = scheme
        self.username = username
        self.password = password
        self.hostname = hostname
        self.port = port
        self.path = path
        self.query = query
        self.fragment = fragment

    @property
    def has_authority(self) -> bool:
        """True when the URL carries a ``//`` authority section."""
        return self.hostname is not None

    @property
    def is_absolute(self) -> bool:
        """True when a scheme is present."""
        return bool(self.scheme)

    @property
    def host(self) -> str:
        """Hostname plus ``:port`` when a port is set."""
        hostname = self.hostname or ""
        if self.port is None:
            return hostname
        return f"{hostname}:{self.port}"

    @property
    def netloc(self) -> str:
        """Authority section without the leading ``//``."""
        userinfo = ""
        if self.username or self.password:
            userinfo = self.username or ""
            if self.password:
                userinfo += ":" + self.password
            userinfo += "@"
        return userinfo + self.host

    def copy(self) -> "RawURL":
        """Return a field-by-field copy."""
        return RawURL(
            self.scheme,
            self.username,
            self.password,
            self.hostname,
            self.port,
            self.path,
            self.query,
            self.fragment,
        )

    def geturl(self) -> str:
        """Serialize back to text. Empty query and fragment are omitted."""
        parts: List[str] = []
        if self.scheme:
            parts.append(self.scheme + ":")
        path = self.path
        if self.has_authority:
            parts.append("//" + self.netloc)
            if path and not path.startswith("/"):
                path = "/" + path
        elif path.startswith("//"):
            # Without "/." the first segment would read back as a host.
            parts.append("/.")
        parts.append(path)
        if self.query:
            parts.append("?" + self.query)
        if self.fragment:
            parts.append("#" + self.fragment)
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawURL):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self.__slots__)

    def __repr__(self) -> str:
        return f"RawURL({self.geturl()!r})"


def _clean(text: str) -> str:
    """Strip C0/space from both ends and remove tab and newline characters."""
    text = text.strip(C0_CONTROL_OR_SPACE)
    for ch in ("\t", "\n", "\r"):
        text = text.replace(ch, "")
    return text


def _split_authority(netloc: str, raw: RawURL, source: str) -> None:
    """Fill credentials, hostname and port of *raw* from *netloc*."""
    userinfo, at, hostport = netloc.rpartition("@")
    if at:
        username, colon, password = userinfo.partition(":")
        # Empty credentials are not serialized, so they are not kept either.
        raw.username = username or None
        raw.password = password if colon and password else None

    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise InvalidURL(url=source)
        hostname, rest = hostport[: end + 1], hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            raise InvalidURL(url=source)
        port = rest[1:] if rest else None
    else:
        hostname, colon, port_text = hostport.partition(":")
        port = port_text if colon else None

    if port:
        if not is_valid_port(port):
            raise InvalidURL(url=source)
        port = str(int(port))
    raw.hostname = hostname
    raw.port = port or None


def split_host(hostport: str) -> Tuple[str, Optional[str]]:
    """Split ``host[:port]`` without validating either part."""
    if hostport.startswith("["):
        end = hostport.find("]")
        if end >= 0:
            rest = hostport[end + 1 :]
            return hostport[: end + 1], rest[1:] if rest.startswith(":") else None
        return hostport, None
    hostname, colon, port = hostport.partition(":")
    return hostname, port if colon else None


def remove_dot_segments(path: str) -> str:
    """Remove ``.`` and ``..`` segments (RFC 3986 section 5.2.4)."""
    if "." not in path:
        return path
    segments = path.split("/")
    output: List[str] = []
    for segment in segments[1:]:
        if segment == "..":
            if output:
                output.pop()
        elif segment != ".":
            output.append(segment)
    # A trailing "." or ".." still denotes a directory.
    if segments[-1] in (".", ".."):
        output.append("")
    return "/" + "/".join(output)


def split(text: str) -> RawURL:
    """
    Split a URL reference into components without resolving it.

    Args:
        text: Absolute URL or relative reference.

    Returns:
        RawURL with absent components set to None.

    Raises:
        InvalidURL: If the text contains control characters or a malformed
            authority (unbalanced brackets, bad port).
    """
    cleaned = _clean(text)
    if has_control_character(cleaned):
        raise InvalidURL(url=text)

    try:
        parts = urlsplit(cleaned)
    except ValueError as exc:
        raise InvalidURL(url=text) from exc

    before_fragment, hash_sign, _ = cleaned.partition("#")
    rest = before_fragment[len(parts.scheme) + 1 :] if parts.scheme else before_fragment

    raw = RawURL(
        scheme=parts.scheme,
        path=parts.path,
        query=parts.query if "?" in before_fragment else None,
        fragment=parts.fragment if hash_sign else None,
    )
    if rest.startswith("//"):
        _split_authority(parts.netloc, raw, text)
    return raw


def _merge(base: RawURL, path: str) -> str:
    if base.has_authority and not base.path:
        return "/" + path
    return base.path[: base.path.rfind("/") + 1] + path


def resolve(base: RawURL, ref: RawURL) -> RawURL:
    """
    Resolve *ref* against the absolute *base* (RFC 3986 section 5.2.2).

    Raises:
        InvalidURL: If *base* has an opaque path (no authority and no
            leading ``/``) and *ref* is anything but a fragment.
    """
    if ref.scheme:
        return ref.copy()

    target = base.copy()
    target.fragment = ref.fragment

    opaque_base = not base.has_authority and not base.path.startswith("/")
    if opaque_base and (ref.has_authority or ref.path or ref.query is not None):
        raise InvalidURL(url=ref.geturl())

    if ref.has_authority:
        target.username = ref.username
        target.password = ref.password
        target.hostname = ref.hostname
        target.port = ref.port
        target.path = remove_dot_segments(ref.path)
        target.query = ref.query
    elif not ref.path:
        if ref.query is not None:
            target.query = ref.query
    else:
        if ref.path.startswith("/"):
            target.path = remove_dot_segments(ref.path)
        else:
            target.path = remove_dot_segments(_merge(base, ref.path))
        target.query = ref.query
    return target


def _normalize(raw: RawURL, source: str) -> RawURL:
    """Apply scheme-dependent normalization and reject empty special hosts."""
    if not raw.scheme:
        raise InvalidURL(url=source)
    if is_special_scheme(raw.scheme):
        if raw.scheme == "file" and raw.hostname is None:
            raw.hostname = ""
        if raw.scheme != "file" and not raw.hostname:
            logger.debug("url.rejected", reason="empty_host", input=source)
            raise InvalidURL(url=source)
        if raw.port is not None and raw.port == default_port(raw.scheme):
            raw.port = None
        if raw.has_authority and not raw.path:
            raw.path = "/"
    if raw.path.startswith("/"):
        raw.path = remove_dot_segments(raw.path)
    # "?" and "#" with nothing after them serialize as absent.
    raw.query = raw.query or ""
    raw.fragment = raw.fragment or ""
    return raw


def parse_absolute(text: str, base: Optional[str] = None) -> RawURL:
    """
    Parse *text*, resolved against *base* when one is given.

    A non-empty *base* must itself be an absolute URL. Without a base,
    *text* must be absolute.

    Raises:
        InvalidURL: On any parse or resolution failure.
    """
    if base:
        base_raw = split(base)
        if not base_raw.is_absolute:
            logger.debug("url.rejected", reason="relative_base", base=base)
            raise InvalidURL(url=base)
        raw = resolve(_normalize(base_raw, base), split(text))
    else:
        raw = split(text)
        if not raw.is_absolute:
            logger.debug("url.rejected", reason="not_absolute", input=text)
            raise InvalidURL(url=text)
    return _normalize(raw, text)
