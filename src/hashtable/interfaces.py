from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from typing_extensions import Self

K = TypeVar("K")
V = TypeVar("V")

UpdateSource = Any


class ICounted(ABC):
    """``ICounted`` types maintain their element count as they are mutated, so
    the count can be read in constant time from :py:attr:`length` .

    Unlike :py:class:`collections.abc.Sized` , the count is not guaranteed to be
    non-negative; see :py:meth:`IAssociative.remove` ."""

    __slots__ = ()

    @property
    @abstractmethod
    def length(self) -> int:
        raise NotImplementedError()


class ILookup(Generic[K, V], ABC):
    """``ILookup`` types allow accessing contained values by a key.

    ``None`` is the absent-marker: looking up a key which is not set returns
    ``None`` (or the given default) rather than raising."""

    __slots__ = ()

    @abstractmethod
    def get(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()


class IAssociative(ILookup[K, V]):
    """``IAssociative`` types support in-place associative operations.

    A key whose stored value is the absent-marker is indistinguishable from an
    unset key for every operation other than :py:meth:`entry` ."""

    __slots__ = ()

    @abstractmethod
    def contains(self, k: K) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def entry(self, k: K) -> Optional[tuple[K, V]]:
        raise NotImplementedError()

    @abstractmethod
    def put(self, k: K, v: V) -> V:
        raise NotImplementedError()

    @abstractmethod
    def remove(self, k: K) -> Self:
        raise NotImplementedError()


class IHash(ICounted, IAssociative[K, V]):
    """``IHash`` types are mutable hashtables with a maintained element count
    and a set of convenience accessors on top of :py:class:`IAssociative` ."""

    __slots__ = ()

    @abstractmethod
    def ensure(self, k: K, default_val: V) -> V:
        raise NotImplementedError()

    @abstractmethod
    def lazy_ensure(self, k: K, default_fn: Callable[[K], V]) -> V:
        raise NotImplementedError()

    @abstractmethod
    def pop(self, k: K) -> Optional[V]:
        raise NotImplementedError()

    @abstractmethod
    def update(self, source: UpdateSource) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def empty(self) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def keys(self) -> list[K]:
        raise NotImplementedError()

    @abstractmethod
    def values(self) -> list[V]:
        raise NotImplementedError()

    @abstractmethod
    def items(self) -> list[tuple[K, V]]:
        raise NotImplementedError()

    @abstractmethod
    def items_obj(self) -> dict[K, V]:
        raise NotImplementedError()
