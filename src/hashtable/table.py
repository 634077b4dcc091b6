import logging
from collections.abc import Iterable, Mapping
from typing import Callable, Optional, TypeVar, cast

from hashtable.exception import UpdateSourceError
from hashtable.interfaces import IHash, UpdateSource
from hashtable.logconfig import TRACE

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_ENTRY_SENTINEL = object()


def _own_items(source: UpdateSource) -> Iterable[tuple[K, V]]:
    """Return the key/value pairs which belong directly to `source`.

    Mappings (and other Hashes) contribute their items. Other iterables are
    treated as a sequence of key/value pairs. Any remaining object contributes
    its instance attributes, which excludes attributes defined on its class.
    Objects without instance attributes (such as numbers) contribute nothing."""
    if isinstance(source, IHash):
        return source.items()
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, Iterable):
        return source
    if hasattr(source, "__dict__"):
        return list(vars(source).items())
    return []


class Hash(IHash[K, V]):
    """Hashtable which maintains its element count in :py:attr:`length` as it
    is mutated, and places no restrictions on the types of keys (beyond Python
    hashability) or values.

    ``None`` is the absent-marker. Storing ``None`` under a key is not
    distinguishable from leaving it unset, except through :py:meth:`entry` .

    Removing a key which is not set still decrements :py:attr:`length` , so
    the count may drift below the number of stored keys (and below zero).
    Each :py:meth:`put` to a key holding ``None`` counts the key again, so
    the count may also drift above it. Mutations made through
    :py:meth:`items_obj` are not counted at all."""

    __slots__ = ("_hash", "_length")

    def __init__(self, copy_from: Optional[UpdateSource] = None) -> None:
        self._hash: dict[K, V] = {}
        self._length = 0
        if copy_from is not None:
            self.update(copy_from)

    def __contains__(self, item):
        return self.contains(item)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Hash):
            return NotImplemented
        return self._hash == other._hash

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter(self.keys())

    def __repr__(self):
        return f"Hash({self._hash!r})"

    @property
    def length(self) -> int:
        return self._length

    def get(self, k: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value of `k`, or `default` if it is not set."""
        return self._hash.get(k, default)

    def contains(self, k: K) -> bool:
        """Return True if `k` is set to a value other than ``None``."""
        return self.get(k) is not None

    def entry(self, k: K) -> Optional[tuple[K, V]]:
        """Return the ``(key, value)`` pair stored for `k`, or None if `k` is not
        stored at all. A key explicitly set to ``None`` yields ``(k, None)``."""
        v = self._hash.get(k, cast("V", _ENTRY_SENTINEL))
        if v is _ENTRY_SENTINEL:
            return None
        return k, v

    def put(self, k: K, v: V) -> V:
        """Set `k` to `v`, then return `v`."""
        if not self.contains(k):
            self._length += 1
        self._hash[k] = v
        return v

    def remove(self, k: K) -> "Hash[K, V]":
        """Remove `k`, returning the Hash itself.

        The count is decremented whether or not `k` was set."""
        try:
            del self._hash[k]
        except KeyError:
            logger.debug(f"Removed absent key {k!r}; length is now under-counted")
        self._length -= 1
        return self

    def ensure(self, k: K, default_val: V) -> V:
        """Set `k` to `default_val` if it is not already set. Return the value
        of `k`."""
        current_val = self.get(k)
        if current_val is None:
            return self.put(k, default_val)
        return current_val

    def lazy_ensure(self, k: K, default_fn: Callable[[K], V]) -> V:
        """Set `k` to `default_fn(k)` if it is not already set. Return the value
        of `k`.

        `default_fn` is only called when `k` is not set, deferring the cost of
        building the default until it is really needed."""
        current_val = self.get(k)
        if current_val is None:
            return self.put(k, default_fn(k))
        return current_val

    def pop(self, k: K) -> Optional[V]:
        """Remove `k` and return its value (or None if it was not set)."""
        current_val = self.get(k)
        self.remove(k)
        return current_val

    def update(self, source: UpdateSource) -> "Hash[K, V]":
        """Copy every key/value pair belonging to `source` into this Hash,
        overwriting existing keys. Return the Hash itself."""
        try:
            for k, v in _own_items(source):
                self.put(k, v)
        except (TypeError, ValueError) as e:
            raise UpdateSourceError(
                "Argument to Hash update must be a mapping, an object, or an "
                "iterable of key/value pairs",
                source,
            ) from e
        return self

    def empty(self) -> "Hash[K, V]":
        """Remove every entry from this Hash, returning the Hash itself."""
        logger.log(TRACE, f"Emptying Hash with length {self._length}")
        self._hash = {}
        self._length = 0
        return self

    def keys(self) -> list[K]:
        """Return a list of all keys in unspecified order. The list does not
        share structure with the Hash."""
        return list(self._hash)

    def values(self) -> list[V]:
        """Return a list of all values in unspecified order. The list does not
        share structure with the Hash, though the values retain their
        identities."""
        return list(self._hash.values())

    def items(self) -> list[tuple[K, V]]:
        return list(self._hash.items())

    def items_obj(self) -> dict[K, V]:
        """Return the dict backing this Hash.

        The dict is shared with the Hash: mutations to either are visible
        through the other, and mutations made directly to the dict are not
        reflected in :py:attr:`length` . Copy it if that is not wanted."""
        return self._hash


def h(**kvs: V) -> Hash[str, V]:
    """Creates a new Hash from keyword arguments."""
    return Hash(kvs)


def from_pairs(pairs: Iterable[tuple[K, V]]) -> Hash[K, V]:
    """Creates a new Hash from an iterable of key/value pairs."""
    return Hash().update(pairs)
