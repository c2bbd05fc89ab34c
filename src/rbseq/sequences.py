"""Ruby-inspired helpers over arbitrary iterables.

Every producing operation returns a generator: arguments are validated
eagerly when the function is called, elements are pulled from ``source``
only as the caller consumes the result.
"""

import logging
from typing import Any, Callable, Hashable, Iterable, Iterator, List, Optional, TypeVar, Union

from rbseq.config.settings import get_settings
from rbseq.exceptions import InvalidArgumentError, NullCallbackError, SinglePassSourceError

logger = logging.getLogger(__name__)

T = TypeVar('T')

__all__ = [
    "NOT_FOUND",
    "reject",
    "chunk",
    "assoc_first_or_default",
    "compact",
    "cycle",
    "for_each",
    "for_each_with_index",
    "distinct",
]


class _NotFound:
    """Absence marker returned when a lookup has no match."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self):
        return (_NotFound, ())


NOT_FOUND = _NotFound()

StopSignal = Union[Callable[[], Any], Any]


def _require_callable(name: str, fn: Any) -> None:
    if fn is None or not callable(fn):
        raise NullCallbackError(name, fn)


def _require_int(name: str, value: Any, minimum: int) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidArgumentError(name, value, expected=f"an integer >= {minimum}")


def _is_single_pass(source: Iterable) -> bool:
    return iter(source) is source


def _stop_check(stop: StopSignal) -> Callable[[], bool]:
    """Normalise a stop signal to a zero-argument predicate."""
    is_set = getattr(stop, "is_set", None)
    if callable(is_set):
        return lambda: bool(is_set())
    if callable(stop):
        return lambda: bool(stop())
    raise InvalidArgumentError(
        "stop", stop, expected="an object with is_set() or a zero-argument callable"
    )


def reject(source: Iterable[T], predicate: Callable[[T], Any]) -> Iterator[T]:
    """Yield the elements of ``source`` for which ``predicate`` is falsy.

    >>> list(reject([1, 2, 3, 4], lambda x: x % 2))
    [2, 4]
    """
    _require_callable("predicate", predicate)
    return _reject(source, predicate)


def _reject(source, predicate):
    for element in source:
        if not predicate(element):
            yield element


def chunk(
    source: Iterable[T],
    size: int,
    *,
    emit_empty: Optional[bool] = None,
) -> Iterator[List[T]]:
    """
    Yield lists of length ``size`` (last chunk may be smaller).

    An empty source yields a single empty list unless ``emit_empty`` is
    False. When ``emit_empty`` is None the ``chunking.emit_empty_group``
    setting decides.

    Args:
        source: Input iterable
        size: Maximum size of each chunk, a positive integer
        emit_empty: Whether an empty source produces one empty chunk

    Yields:
        Fresh lists of consecutive items from ``source``

    >>> list(chunk([1, 2, 3, 4, 5], 2))
    [[1, 2], [3, 4], [5]]
    """
    _require_int("size", size, 1)
    if emit_empty is None:
        emit_empty = get_settings().chunking.emit_empty_group
    return _chunk(source, size, emit_empty)


def _chunk(source, size, emit_empty):
    batch: list = []
    produced = False
    for item in source:
        batch.append(item)
        if len(batch) >= size:
            yield batch
            produced = True
            batch = []
    if batch or (emit_empty and not produced):
        yield batch


def assoc_first_or_default(
    source: Iterable[Iterable[T]],
    target: T,
    default: Any = NOT_FOUND,
) -> Any:
    """
    Return the first group in ``source`` that contains ``target``.

    Groups are scanned in order, and each group element by element, so
    scanning stops at the first match. The matching group itself is
    returned, not a copy. When no group contains ``target`` the result
    is ``default``, which is ``NOT_FOUND`` unless given.

    >>> assoc_first_or_default([[1, 2], [3, 4]], 3)
    [3, 4]
    >>> assoc_first_or_default([[1, 2]], 9)
    NOT_FOUND
    """
    for group in source:
        for element in group:
            if element == target:
                return group
    return default


def compact(source: Iterable[Optional[T]]) -> Iterator[T]:
    """Yield every element of ``source`` that is not None."""
    for item in source:
        if item is not None:
            yield item


def cycle(
    source: Iterable[T],
    action: Callable[[T], Any],
    times: Optional[int] = None,
    *,
    stop: Optional[StopSignal] = None,
) -> None:
    """
    Call ``action`` on every element of ``source``, pass after pass.

    With ``times`` the source is walked that many times (0 does nothing).
    Without it the loop runs until ``stop`` is set; ``stop`` is then
    mandatory. ``stop`` is either an object exposing ``is_set()`` such as
    :class:`threading.Event`, or a zero-argument callable returning a truthy
    value once iteration should end. It is checked before every pass and
    after every element.

    ``source`` is re-iterated from the start on every pass, so a one-shot
    iterator is rejected whenever more than one pass may be needed.

    Raises:
        NullCallbackError: ``action`` is missing or not callable
        InvalidArgumentError: ``times`` is not a non-negative integer, or
            neither ``times`` nor ``stop`` is given
        SinglePassSourceError: ``source`` cannot be re-iterated
    """
    _require_callable("action", action)
    if times is None:
        if stop is None:
            raise InvalidArgumentError(
                "stop", stop, expected="a stop signal when times is None"
            ).add_suggestion("Pass times=N or a threading.Event as stop=")
    else:
        _require_int("times", times, 0)

    should_stop = _stop_check(stop) if stop is not None else (lambda: False)

    if (times is None or times > 1) and _is_single_pass(source):
        raise SinglePassSourceError(source, passes=times)

    verbose = get_settings().cycle.log_every_pass
    passes = 0
    while times is None or passes < times:
        if should_stop():
            logger.debug("cycle stopped before pass %d", passes + 1)
            return
        for element in source:
            action(element)
            if should_stop():
                logger.debug("cycle stopped during pass %d", passes + 1)
                return
        passes += 1
        logger.log(logging.INFO if verbose else logging.DEBUG, "cycle completed pass %d", passes)


def for_each(source: Iterable[T], action: Callable[[T], Any]) -> Iterator[T]:
    """Yield ``source`` unchanged, calling ``action(element)`` as each is pulled."""
    _require_callable("action", action)
    return _for_each(source, action)


def _for_each(source, action):
    for element in source:
        action(element)
        yield element


def for_each_with_index(
    source: Iterable[T],
    action: Callable[[T, int], Any],
    start: int = 0,
) -> Iterator[T]:
    """Like :func:`for_each` but calls ``action(element, index)``.

    The index counts pulled elements from ``start`` for this iteration only.
    """
    _require_callable("action", action)
    if isinstance(start, bool) or not isinstance(start, int):
        raise InvalidArgumentError("start", start, expected="an integer")
    return _for_each_with_index(source, action, start)


def _for_each_with_index(source, action, start):
    for index, element in enumerate(source, start):
        action(element, index)
        yield element


def distinct(source: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """
    Yield the first element for each distinct ``key(element)``.

    Order of first occurrence is preserved and None is an ordinary key.
    Seen keys are kept for the lifetime of the generator. Unhashable keys
    fall back to a list compared by equality, which is linear per lookup.

    >>> list(distinct(["apple", "avocado", "banana"], key=lambda s: s[0]))
    ['apple', 'banana']
    """
    _require_callable("key", key)
    return _distinct(source, key)


def _distinct(source, key):
    seen_set = set()
    seen_list = []
    for item in source:
        marker = key(item)
        try:
            if marker in seen_set:
                continue
        except TypeError:
            # unhashable keys may still equal a hashable one seen earlier
            if marker in seen_list or any(marker == seen for seen in seen_set):
                continue
            seen_list.append(marker)
        else:
            if seen_list and marker in seen_list:
                continue
            seen_set.add(marker)
        yield item
