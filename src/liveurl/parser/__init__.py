"""src/liveurl/parser/__init__.py"""

from .resolver import RawURL, parse_absolute, resolve, split

__all__ = ["RawURL", "split", "resolve", "parse_absolute"]
