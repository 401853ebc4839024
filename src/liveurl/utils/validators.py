"""utils/validators.py

Scheme and authority validation utilities for LiveURL.
"""

from typing import Dict, Optional

# Special schemes of the URL Standard and their default ports.
SPECIAL_SCHEMES: Dict[str, Optional[str]] = {
    "ftp": "21",
    "file": None,
    "http": "80",
    "https": "443",
    "ws": "80",
    "wss": "443",
}

# Schemes whose origin is a tuple origin; everything else serializes as "null".
TUPLE_ORIGIN_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

MAX_PORT = 65535

# Leading/trailing characters stripped from input before parsing.
C0_CONTROL_OR_SPACE = "".join(chr(c) for c in range(0x21))


def is_special_scheme(scheme: str) -> bool:
    """Return True for http, https, ws, wss, ftp and file."""
    return scheme in SPECIAL_SCHEMES


def default_port(scheme: str) -> Optional[str]:
    """Default port of *scheme* as a string, or None."""
    return SPECIAL_SCHEMES.get(scheme)


def is_valid_port(port: str) -> bool:
    """Port must be ASCII digits and fit in 16 bits."""
    return port.isascii() and port.isdigit() and int(port) <= MAX_PORT


def has_control_character(text: str) -> bool:
    """True if *text* contains any C0 control character."""
    return any(ord(ch) < 0x20 for ch in text)
