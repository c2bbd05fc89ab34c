"""Fluent wrapper over the sequence helpers."""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from rbseq import sequences
from rbseq.sequences import NOT_FOUND

T = TypeVar('T')


class Chain(Generic[T]):
    """
    A chainable, lazy view over an iterable.

    Transforming methods wrap the result of the matching function in
    :mod:`rbseq.sequences` and return a new Chain; nothing is pulled
    from the source until the chain is iterated or a terminal method
    (``to_list``, ``first``, ``assoc_first_or_default``, ``cycle``) runs.

    >>> Chain([1, None, 2, 3, 4]).compact().reject(lambda x: x % 2).to_list()
    [2, 4]
    """

    def __init__(self, source: Iterable[T]):
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"Chain({self._source!r})"

    # --------- chainable operators (lazy) ----------
    def reject(self, predicate: Callable[[T], Any]) -> "Chain[T]":
        return Chain(sequences.reject(self._source, predicate))

    def chunk(self, size: int, *, emit_empty: Optional[bool] = None) -> "Chain[List[T]]":
        return Chain(sequences.chunk(self._source, size, emit_empty=emit_empty))

    def compact(self) -> "Chain[T]":
        return Chain(sequences.compact(self._source))

    def for_each(self, action: Callable[[T], Any]) -> "Chain[T]":
        return Chain(sequences.for_each(self._source, action))

    def for_each_with_index(self, action: Callable[[T, int], Any], start: int = 0) -> "Chain[T]":
        return Chain(sequences.for_each_with_index(self._source, action, start))

    def distinct(self, key: Callable[[T], Any]) -> "Chain[T]":
        return Chain(sequences.distinct(self._source, key))

    # --------- terminal operations (force evaluation) ----------
    def to_list(self) -> List[T]:
        return list(self._source)

    def first(self, default: Any = NOT_FOUND) -> Any:
        """Return the first element, or ``default`` if empty"""
        for item in self._source:
            return item
        return default

    def assoc_first_or_default(self, target: Any, default: Any = NOT_FOUND) -> Any:
        return sequences.assoc_first_or_default(self._source, target, default)

    def cycle(self, action: Callable[[T], Any], times: Optional[int] = None, *, stop=None) -> None:
        sequences.cycle(self._source, action, times, stop=stop)
