"""src/liveurl/model/__init__.py

URL and URLSearchParams objects.

This module provides the user-facing URL record and its live query
parameter collection, kept synchronized with each other.
"""

from .search_params import URLSearchParams
from .url import URL, can_parse, parse

__all__ = ["URL", "URLSearchParams", "parse", "can_parse"]
