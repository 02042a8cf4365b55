"""
Generic operations over immutable indexed sequences.

Inputs are Sequences that support slicing (tuple, list, range, str).
Every operation that builds a sequence returns a new tuple; inputs are
never modified. Partial operations return None instead of raising when
there is no result.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Sequence, Iterable, Any
from dataclasses import dataclass
from functools import reduce
import builtins
import operator

from .basics import compare, compose2
from .ordering import Ordering, CompareFunc

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


# Traversal & lookup

def head(seq: Sequence[T]) -> T | None:
    """First element, or None for an empty sequence."""
    return seq[0] if len(seq) > 0 else None


def tail(seq: Sequence[T]) -> tuple[T, ...]:
    """Everything but the first element. Empty input gives ()."""
    return tuple(seq[1:])


def is_empty(seq: Sequence[Any]) -> bool:
    return len(seq) == 0


def member(value: T, seq: Sequence[T]) -> bool:
    return index_of(value, seq) is not None


def index_of(value: T, seq: Sequence[T]) -> int | None:
    """Lowest index whose element equals value, or None."""
    for i, x in enumerate(seq):
        if x == value:
            return i
    return None


def reverse(seq: Sequence[T]) -> tuple[T, ...]:
    return tuple(reversed(seq))


# Construction

def initialize(n: int, f: Callable[[int], T]) -> tuple[T, ...]:
    return tuple(f(i) for i in range(n))


def initialize2(n: int, m: int, f: Callable[[int, int], T]) -> tuple[tuple[T, ...], ...]:
    """
    Build an n x m grid where result[i][j] == f(i, j).

    Example:
        initialize2(2, 3, lambda i, j: (i, j))
        # (((0, 0), (0, 1), (0, 2)), ((1, 0), (1, 1), (1, 2)))
    """
    return tuple(tuple(f(i, j) for j in range(m)) for i in range(n))


def initialize3(
    x: int, y: int, z: int, f: Callable[[int, int, int], T]
) -> tuple[tuple[tuple[T, ...], ...], ...]:
    """Build an x * y * z cube where result[i][j][k] == f(i, j, k)."""
    return tuple(
        tuple(tuple(f(i, j, k) for k in range(z)) for j in range(y))
        for i in range(x)
    )


# Combination

def intersperse(value: T, seq: Sequence[T]) -> tuple[T, ...]:
    """
    Put value between every pair of adjacent elements.

    Example:
        intersperse("on", ["turtles", "turtles", "turtles"])
        # ("turtles", "on", "turtles", "on", "turtles")
    """
    result: list[T] = []
    for i, x in enumerate(seq):
        if i > 0:
            result.append(value)
        result.append(x)
    return tuple(result)


def concat(seqs: Iterable[Sequence[T]]) -> tuple[T, ...]:
    return tuple(x for inner in seqs for x in inner)


def concat_map(f: Callable[[T], Sequence[U]], seq: Sequence[T]) -> tuple[U, ...]:
    return concat(f(x) for x in seq)


# Parallel combinators. Results are as long as the shortest input.

def _map_n(f: Callable[..., R], *seqs: Sequence[Any]) -> tuple[R, ...]:
    return tuple(f(*args) for args in builtins.zip(*seqs))


def map2(f: Callable[[Any, Any], R], a: Sequence[Any], b: Sequence[Any]) -> tuple[R, ...]:
    """
    Apply f pointwise across two sequences.

    Example:
        map2(operator.add, [1, 2, 3], [1, 2, 3, 4])  # (2, 4, 6)
    """
    return _map_n(f, a, b)


def map3(
    f: Callable[[Any, Any, Any], R],
    a: Sequence[Any],
    b: Sequence[Any],
    c: Sequence[Any],
) -> tuple[R, ...]:
    return _map_n(f, a, b, c)


def map4(
    f: Callable[[Any, Any, Any, Any], R],
    a: Sequence[Any],
    b: Sequence[Any],
    c: Sequence[Any],
    d: Sequence[Any],
) -> tuple[R, ...]:
    return _map_n(f, a, b, c, d)


def map5(
    f: Callable[[Any, Any, Any, Any, Any], R],
    a: Sequence[Any],
    b: Sequence[Any],
    c: Sequence[Any],
    d: Sequence[Any],
    e: Sequence[Any],
) -> tuple[R, ...]:
    return _map_n(f, a, b, c, d, e)


def _group(*args: Any) -> tuple[Any, ...]:
    return args


def zip(a: Sequence[Any], b: Sequence[Any]) -> tuple[tuple[Any, Any], ...]:
    return map2(_group, a, b)


def zip3(
    a: Sequence[Any], b: Sequence[Any], c: Sequence[Any]
) -> tuple[tuple[Any, Any, Any], ...]:
    return map3(_group, a, b, c)


def zip4(
    a: Sequence[Any], b: Sequence[Any], c: Sequence[Any], d: Sequence[Any]
) -> tuple[tuple[Any, Any, Any, Any], ...]:
    return map4(_group, a, b, c, d)


def zip5(
    a: Sequence[Any],
    b: Sequence[Any],
    c: Sequence[Any],
    d: Sequence[Any],
    e: Sequence[Any],
) -> tuple[tuple[Any, Any, Any, Any, Any], ...]:
    return map5(_group, a, b, c, d, e)


def _unzip_n(n: int, seq: Sequence[Sequence[Any]]) -> tuple[tuple[Any, ...], ...]:
    # Built per component so empty input still yields n empty tuples.
    return tuple(tuple(t[k] for t in seq) for k in range(n))


def unzip(pairs: Sequence[tuple[Any, Any]]) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
    """
    Split a sequence of pairs into two sequences.

    Example:
        unzip([(1, "a"), (2, "b")])  # ((1, 2), ("a", "b"))
    """
    return _unzip_n(2, pairs)  # type: ignore[return-value]


def unzip3(triples: Sequence[tuple[Any, ...]]) -> tuple[tuple[Any, ...], ...]:
    return _unzip_n(3, triples)


def unzip4(quadruples: Sequence[tuple[Any, ...]]) -> tuple[tuple[Any, ...], ...]:
    return _unzip_n(4, quadruples)


def unzip5(quintuples: Sequence[tuple[Any, ...]]) -> tuple[tuple[Any, ...], ...]:
    return _unzip_n(5, quintuples)


# Safe reduction & aggregates

def foldl_safe(reducer: Callable[[T, T], T], seq: Sequence[T]) -> T | None:
    """
    Fold left to right, seeded with the first element.

    Needs no identity element, so it works for types that have none.
    reducer is called as reducer(acc, element). Returns None when empty.
    """
    if len(seq) == 0:
        return None
    return reduce(reducer, seq[1:], seq[0])


def foldr_safe(reducer: Callable[[T, T], T], seq: Sequence[T]) -> T | None:
    """
    Fold right to left, seeded with the last element.

    reducer is called as reducer(element, acc). Returns None when empty.
    """
    if len(seq) == 0:
        return None
    acc = seq[-1]
    for x in reversed(seq[:-1]):
        acc = reducer(x, acc)
    return acc


def sum(seq: Sequence[Any]) -> Any:
    return reduce(operator.add, seq, 0)


def product(seq: Sequence[Any]) -> Any:
    return reduce(operator.mul, seq, 1)


def maximum(seq: Sequence[T]) -> T | None:
    return foldl_safe(max, seq)


def minimum(seq: Sequence[T]) -> T | None:
    return foldl_safe(min, seq)


# Sorting

@dataclass
class _Pivot(Generic[T]):
    """Work-stack entry for an element already in its final position."""
    value: T


def sort_with(cmp: CompareFunc[T], seq: Sequence[T]) -> tuple[T, ...]:
    """
    Quicksort with the first element as pivot.

    Elements comparing LESS or EQUAL to the pivot go left, GREATER go
    right; both partitions keep their input order. Not stable: elements
    equal to a pivot end up ahead of it. Uses an explicit work stack
    rather than recursion, so already-sorted input of any length is fine
    (though quadratic).

    Args:
        cmp: Returns an Ordering, or a negative / zero / positive int,
             for cmp(element, pivot).

    Raises:
        ComparatorError: If cmp returns anything else.
    """
    result: list[T] = []
    work: list[Sequence[T] | _Pivot[T]] = [seq]

    while work:
        item = work.pop()
        if isinstance(item, _Pivot):
            result.append(item.value)
            continue
        if len(item) == 0:
            continue

        pivot = item[0]
        lesser: list[T] = []
        greater: list[T] = []
        for x in item[1:]:
            if Ordering.of(cmp(x, pivot)) is Ordering.GREATER:
                greater.append(x)
            else:
                lesser.append(x)

        # Popped in reverse: lesser first, then the pivot, then greater.
        work.append(greater)
        work.append(_Pivot(pivot))
        work.append(lesser)

    return tuple(result)


def sort(seq: Sequence[T]) -> tuple[T, ...]:
    return sort_with(compare, seq)


def sort_by(key: Callable[[T], Any], seq: Sequence[T]) -> tuple[T, ...]:
    """Sort by the natural order of key(element)."""
    return sort_with(compose2(compare, key), seq)
