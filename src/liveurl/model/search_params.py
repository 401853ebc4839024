"""src/liveurl/model/search_params.py

URLSearchParams implementation for LiveURL.
"""

import weakref
from typing import (
    TYPE_CHECKING,
    Callable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from liveurl.codec.form import encode_form_encoded, parse_form_encoded
from liveurl.utils.ordering import code_unit_key

if TYPE_CHECKING:  # pragma: no cover
    from liveurl.model.url import URL

__all__ = ["URLSearchParams", "Pair"]

Pair = Tuple[str, str]

SearchParamsInit = Union[
    None,
    str,
    "URLSearchParams",
    Mapping[str, str],
    Iterable[Sequence[str]],
]


class URLSearchParams:
    """
    Ordered list of query parameters with WHATWG URLSearchParams semantics.

    Duplicate keys are allowed and insertion order is kept by every
    operation except :meth:`sort`. When attached to a :class:`URL`, every
    mutation is written back to the URL's query before the method returns.

    Iteration (``iter()``, :meth:`entries`, :meth:`keys`, :meth:`values`,
    :meth:`for_each`) works on a snapshot taken at call time; mutations made
    while iterating are not observed.
    """

    __slots__ = ("_pairs", "_owner")

    def __init__(self, init: SearchParamsInit = None):
        """
        Build a parameter list.

        Args:
            init: Query string (a leading ``?`` is ignored), another
                URLSearchParams (copied, never attached), a mapping of
                key to value, or an iterable of two-item sequences.

        Raises:
            TypeError: If an item of an iterable init is not a pair.
        """
        self._pairs: List[Pair] = []
        self._owner: Optional["weakref.ReferenceType[URL]"] = None

        if init is None:
            return
        if isinstance(init, str):
            self._pairs = parse_form_encoded(init[1:] if init.startswith("?") else init)
        elif isinstance(init, URLSearchParams):
            self._pairs = list(init._pairs)
        elif isinstance(init, Mapping):
            self._pairs = [(str(k), str(v)) for k, v in init.items()]
        else:
            for item in init:
                pair = list(item)
                if len(pair) != 2:
                    raise TypeError(
                        f"URLSearchParams init items must be pairs, got {item!r}"
                    )
                self._pairs.append((str(pair[0]), str(pair[1])))

    # -- owner handling -------------------------------------------------

    def _attach(self, owner: "URL") -> None:
        self._owner = weakref.ref(owner)

    def _replace(self, query: str) -> None:
        """Repopulate in place from a raw query without syncing back."""
        self._pairs[:] = parse_form_encoded(query)

    def _sync(self) -> None:
        owner = self._owner() if self._owner is not None else None
        if owner is not None:
            owner._sync_from_search_params()  # pylint: disable=protected-access

    # -- mutation -------------------------------------------------------

    def append(self, key: str, value: str) -> None:
        """Add a pair at the end."""
        self._pairs.append((key, value))
        self._sync()

    def delete_all(self, key: str) -> None:
        """Remove every pair whose key is *key*."""
        self._pairs[:] = [p for p in self._pairs if p[0] != key]
        self._sync()

    def delete_pair(self, key: str, value: str) -> None:
        """Remove every pair matching both *key* and *value*."""
        self._pairs[:] = [p for p in self._pairs if p != (key, value)]
        self._sync()

    def delete(self, key: str, value: Optional[str] = None) -> None:
        """
        Remove pairs by key, or by key and value when *value* is given.

        Args:
            key: Key to remove.
            value: If not None, only pairs with this exact value are removed.
        """
        if value is None:
            self.delete_all(key)
        else:
            self.delete_pair(key, value)

    def set(self, key: str, value: str) -> None:
        """
        Set *key* to a single *value*.

        The first pair with *key* keeps its position and takes the new value;
        later pairs with the same key are dropped. If *key* is absent the
        pair is appended.
        """
        pairs: List[Pair] = []
        found = False
        for pair in self._pairs:
            if pair[0] != key:
                pairs.append(pair)
            elif not found:
                pairs.append((key, value))
                found = True
        if not found:
            pairs.append((key, value))
        self._pairs[:] = pairs
        self._sync()

    def sort(self) -> None:
        """Stable sort by key, comparing keys as UTF-16 code units."""
        self._pairs.sort(key=lambda p: code_unit_key(p[0]))
        self._sync()

    # -- lookup ---------------------------------------------------------

    def get(self, key: str) -> Optional[str]:
        """First value for *key*, or None if absent."""
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def get_all(self, key: str) -> List[str]:
        """All values for *key* in insertion order."""
        return [v for k, v in self._pairs if k == key]

    def has_key(self, key: str) -> bool:
        """True if any pair has *key*."""
        return any(k == key for k, _ in self._pairs)

    def has_pair(self, key: str, value: str) -> bool:
        """True if the exact (*key*, *value*) pair is present."""
        return (key, value) in self._pairs

    def has(self, key: str, value: Optional[str] = None) -> bool:
        """Key test, narrowed to an exact pair when *value* is given."""
        if value is None:
            return self.has_key(key)
        return self.has_pair(key, value)

    @property
    def size(self) -> int:
        """Number of pairs."""
        return len(self._pairs)

    # -- snapshots ------------------------------------------------------

    def entries(self) -> Iterator[Pair]:
        return iter(list(self._pairs))

    def keys(self) -> Iterator[str]:
        return iter([k for k, _ in self._pairs])

    def values(self) -> Iterator[str]:
        return iter([v for _, v in self._pairs])

    def for_each(self, visitor: Callable[[str, str], object]) -> None:
        """Call ``visitor(value, key)`` for each pair of a snapshot."""
        for key, value in list(self._pairs):
            visitor(value, key)

    def clone(self) -> "URLSearchParams":
        """Copy of the pairs with no owner attached."""
        return URLSearchParams(self)

    def to_string(self) -> str:
        """Form-urlencoded serialization, without a leading ``?``."""
        return encode_form_encoded(self._pairs)

    # -- dunder ---------------------------------------------------------

    def __iter__(self) -> Iterator[Pair]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_key(key)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"URLSearchParams({self._pairs!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URLSearchParams):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "URLSearchParams":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "URLSearchParams":
        return self.clone()
