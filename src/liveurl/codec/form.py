"""src/liveurl/codec/form.py

application/x-www-form-urlencoded codec for LiveURL.

All routines are pure functions over ``str``. Byte-level work happens on the
UTF-8 encoding of the input, as the URL Standard describes it.
"""

import string
from typing import Iterable, List, Tuple
from urllib.parse import unquote_to_bytes

__all__ = [
    "percent_decode",
    "form_encode",
    "parse_form_encoded",
    "encode_form_encoded",
]

_FORM_SAFE = frozenset(
    (string.ascii_letters + string.digits + "*-._").encode("ascii")
)

# One entry per byte value: the literal character, "+" for space, or "%XX".
_FORM_TABLE = tuple(
    "+" if b == 0x20 else chr(b) if b in _FORM_SAFE else f"%{b:02X}"
    for b in range(256)
)


def _utf8(s: str) -> bytes:
    """Encode to UTF-8, replacing lone surrogates with U+FFFD."""
    try:
        return s.encode("utf-8")
    except UnicodeEncodeError:
        # Re-pair valid surrogate halves and replace the unpaired ones.
        repaired = s.encode("utf-16-le", "surrogatepass").decode(
            "utf-16-le", "replace"
        )
        return repaired.encode("utf-8")


def percent_decode(s: str) -> str:
    """
    Decode ``%XX`` escapes in *s*.

    A ``%`` that is not followed by two hex digits is kept as is, byte for
    byte. Decoded bytes that do not form valid UTF-8 become U+FFFD. This is
    a deliberate loss: the original bytes are dropped, so ``%FF`` decodes
    to U+FFFD and encodes back as ``%EF%BF%BD``. Results are ``str``; a
    byte-exact round trip would need a ``bytes`` API.

    Args:
        s: Text possibly containing percent escapes.

    Returns:
        The decoded text.
    """
    if "%" not in s:
        return s
    return unquote_to_bytes(_utf8(s)).decode("utf-8", "replace")


def form_encode(s: str) -> str:
    """
    Encode *s* for use as a form-urlencoded key or value.

    Space becomes ``+``; ASCII letters, digits and ``*-._`` are copied;
    every other UTF-8 byte becomes ``%XX`` with uppercase hex digits.
    """
    return "".join([_FORM_TABLE[b] for b in _utf8(s)])


def parse_form_encoded(raw: str) -> List[Tuple[str, str]]:
    """
    Parse a form-urlencoded string into ordered (key, value) pairs.

    Empty segments are dropped. A segment without ``=`` yields an empty
    value. ``+`` is turned into a space before percent-decoding, so an
    encoded ``%2B`` survives as a literal plus sign.

    Args:
        raw: Query text without a leading ``?``.

    Returns:
        List of decoded pairs in input order.
    """
    pairs: List[Tuple[str, str]] = []
    if not raw:
        return pairs

    for segment in raw.split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        pairs.append(
            (
                percent_decode(key.replace("+", " ")),
                percent_decode(value.replace("+", " ")),
            )
        )
    return pairs


def encode_form_encoded(pairs: Iterable[Tuple[str, str]]) -> str:
    """Serialize pairs as ``key=value`` joined with ``&`` (empty input -> "")."""
    return "&".join(f"{form_encode(k)}={form_encode(v)}" for k, v in pairs)
