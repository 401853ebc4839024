"""src/liveurl/model/url.py

WHATWG-style URL object for LiveURL.

A :class:`URL` owns exactly one :class:`URLSearchParams`. The two are kept
in step: mutating the parameters rewrites the query, assigning ``search``
or ``href`` repopulates the same parameters object in place.
"""

import logging
from typing import Optional

from liveurl.exceptions import InvalidURL
from liveurl.model.search_params import URLSearchParams
from liveurl.parser.resolver import RawURL, parse_absolute, split_host
from liveurl.utils.logging import get_logger
from liveurl.utils.validators import TUPLE_ORIGIN_SCHEMES, default_port

__all__ = ["URL", "parse", "can_parse"]

logger = get_logger(__name__)

# pylint: disable=too-many-public-methods,protected-access


class URL:
    """
    Parsed URL with read/write component properties.

    Attributes:
        search_params: Live query parameters; the same object for the
            lifetime of the URL.
    """

    __slots__ = ("_raw", "_search_params", "__weakref__")

    def __init__(self, url: str, base: Optional[str] = None) -> None:
        """
        Parse *url*, resolved against *base* when given.

        Args:
            url: Absolute URL, or a reference relative to *base*.
            base: Absolute base URL. Empty or None means no base.

        Raises:
            InvalidURL: If either string cannot be parsed, *base* is not
                absolute, or the result has no scheme.
        """
        self._raw: RawURL = parse_absolute(url, base)
        self._search_params = URLSearchParams()
        self._search_params._replace(self._raw.query or "")
        self._search_params._attach(self)

    @classmethod
    def parse(cls, url: str, base: Optional[str] = None) -> Optional["URL"]:
        """Like the constructor, but return None instead of raising."""
        try:
            return cls(url, base)
        except InvalidURL:
            return None

    @classmethod
    def can_parse(cls, url: str, base: Optional[str] = None) -> bool:
        """True if ``URL(url, base)`` would succeed."""
        try:
            parse_absolute(url, base)
        except InvalidURL:
            return False
        return True

    # -- synchronization ------------------------------------------------

    def _sync_from_search_params(self) -> None:
        self._raw.query = self._search_params.to_string()
        # Runs on every parameter mutation; skip the processor chain when off.
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("search_params.synced", query=self._raw.query)

    # -- href -----------------------------------------------------------

    @property
    def href(self) -> str:
        """Full serialization."""
        return self._raw.geturl()

    @href.setter
    def href(self, value: str) -> None:
        raw = parse_absolute(value)
        self._raw = raw
        self._search_params._replace(raw.query or "")
        logger.debug("url.href_reset", href=value)

    # -- scheme ---------------------------------------------------------

    @property
    def protocol(self) -> str:
        return self._raw.scheme + ":"

    @protocol.setter
    def protocol(self, value: str) -> None:
        scheme = value[:-1] if value.endswith(":") else value
        # An empty scheme would leave the URL non-absolute; keep the old one.
        if scheme:
            self._raw.scheme = scheme.lower()

    # -- credentials ----------------------------------------------------

    @property
    def username(self) -> str:
        return self._raw.username or ""

    @username.setter
    def username(self, value: str) -> None:
        self._raw.username = value
        if self._raw.hostname is None:
            self._raw.hostname = ""

    @property
    def password(self) -> str:
        return self._raw.password or ""

    @password.setter
    def password(self, value: str) -> None:
        self._raw.password = value
        if self._raw.hostname is None:
            self._raw.hostname = ""

    # -- authority ------------------------------------------------------

    @property
    def host(self) -> str:
        """Hostname plus ``:port`` when a non-default port is set."""
        return self._raw.host

    @host.setter
    def host(self, value: str) -> None:
        hostname, port = split_host(value)
        self._raw.hostname = hostname
        self._set_port(port)

    @property
    def hostname(self) -> str:
        return self._raw.hostname or ""

    @hostname.setter
    def hostname(self, value: str) -> None:
        self._raw.hostname = value

    @property
    def port(self) -> str:
        """Port digits, or "" when absent or the scheme default."""
        return self._raw.port or ""

    @port.setter
    def port(self, value: str) -> None:
        self._set_port(value)

    def _set_port(self, port: Optional[str]) -> None:
        if not port or port == default_port(self._raw.scheme):
            self._raw.port = None
        else:
            self._raw.port = port
        if self._raw.hostname is None:
            self._raw.hostname = ""

    # -- path, query, fragment ------------------------------------------

    @property
    def pathname(self) -> str:
        """Path, always starting with ``/``."""
        path = self._raw.path
        return path if path.startswith("/") else "/" + path

    @pathname.setter
    def pathname(self, value: str) -> None:
        self._raw.path = value

    @property
    def search(self) -> str:
        """Query with a leading ``?``, or "" when there is none."""
        return "?" + self._raw.query if self._raw.query else ""

    @search.setter
    def search(self, value: str) -> None:
        query = value[1:] if value.startswith("?") else value
        self._raw.query = query
        self._search_params._replace(query)

    @property
    def hash(self) -> str:
        """Fragment with a leading ``#``, or "" when there is none."""
        return "#" + self._raw.fragment if self._raw.fragment else ""

    @hash.setter
    def hash(self, value: str) -> None:
        self._raw.fragment = value[1:] if value.startswith("#") else value

    # -- derived --------------------------------------------------------

    @property
    def origin(self) -> str:
        """``scheme://host`` for http(s), ws(s) and ftp; "null" otherwise."""
        if self._raw.scheme in TUPLE_ORIGIN_SCHEMES:
            return f"{self._raw.scheme}://{self._raw.host}"
        return "null"

    @property
    def search_params(self) -> URLSearchParams:
        return self._search_params

    def to_json(self) -> str:
        return self.href

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"URL({self.href!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self.href == other.href

    __hash__ = None  # type: ignore[assignment]


def parse(url: str, base: Optional[str] = None) -> Optional[URL]:
    """Module-level alias of :meth:`URL.parse`."""
    return URL.parse(url, base)


def can_parse(url: str, base: Optional[str] = None) -> bool:
    """Module-level alias of :meth:`URL.can_parse`."""
    return URL.can_parse(url, base)
