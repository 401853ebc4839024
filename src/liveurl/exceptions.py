"""src/liveurl/exceptions.py

LiveURL Exceptions hierarchy.
"""

from typing import Optional


class LiveURLError(Exception):
    """Base exception for all LiveURL errors."""


class InvalidURL(LiveURLError, TypeError):
    """
    Input (or base) could not be parsed into an absolute URL.

    Subclasses TypeError so callers mirroring the WHATWG API can catch the
    same exception class a browser would throw.
    """

    def __init__(self, message: str = "Invalid URL", url: Optional[str] = None):
        super().__init__(message)
        self.url = url
