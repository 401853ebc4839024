"""utils/ordering.py

UTF-16 code unit ordering for LiveURL.

Python compares ``str`` by code point, which orders characters above the
Basic Multilingual Plane after U+E000..U+FFFF. The URL Standard sorts
search parameters by UTF-16 code units, where those characters appear as a
surrogate pair starting at 0xD800 and therefore sort *before* U+E000.
"""


def code_unit_key(s: str) -> bytes:
    """
    Sort key ordering strings by their UTF-16 code units.

    Big-endian encoding makes a byte-wise comparison of the keys identical
    to a unit-wise comparison of the strings, including the shorter-prefix
    rule.
    """
    return s.encode("utf-16-be", "surrogatepass")
