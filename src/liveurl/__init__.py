"""src/liveurl/__init__.py

LiveURL - WHATWG URL and URLSearchParams for Python.

LiveURL parses text into URL records, serializes them back to canonical
text, and attaches to every URL a live query-parameter list that stays
synchronized with the URL's query in both directions.

Key Features:
    - URL parsing with optional resolution against an absolute base
    - Read/write component properties (protocol, host, port, pathname, ...)
    - URLSearchParams with the full WHATWG mutation API
    - Stable sort of parameters by UTF-16 code units
    - Memory optimized with __slots__

Example:
    Parsing and editing::

        from liveurl import URL

        url = URL("https://example.com/search?q=python")
        url.search_params.append("page", "2")
        print(url.href)  # https://example.com/search?q=python&page=2

    Resolving a reference::

        from liveurl import URL

        url = URL("../img/logo.png", "https://example.com/docs/index.html")
        print(url.pathname)  # /img/logo.png

    Non-raising helpers::

        from liveurl import URL

        URL.can_parse("not a url")  # False
        URL.parse("/relative")      # None
"""

from liveurl.exceptions import InvalidURL, LiveURLError
from liveurl.model.search_params import URLSearchParams
from liveurl.model.url import URL, can_parse, parse
from liveurl.version import __version__

__all__ = [
    "URL",
    "URLSearchParams",
    "parse",
    "can_parse",
    "InvalidURL",
    "LiveURLError",
    "__version__",
]
