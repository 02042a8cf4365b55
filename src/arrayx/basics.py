"""
Numeric helpers and composition combinators.

The composeN family adapts a one-argument transform so it is applied to
every argument of an N-argument function:

    by_length = compose2(compare, len)
    by_length("ab", "abc")  # Ordering.LESS
"""

from __future__ import annotations
import math
from typing import TypeVar, Callable, Any

from .ordering import Ordering

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

infinity = math.inf


def identity(x: A) -> A:
    return x


def compare(a: Any, b: Any) -> Ordering:
    """Natural three-way comparison using < and >."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def lerp(start: float, end: float, t: float) -> float:
    """
    Linear interpolation between start and end.

    t = 0 gives start, t = 1 gives end; values outside [0, 1] extrapolate.
    """
    return start + (end - start) * t


def range_map(
    in_min: float, in_max: float, out_min: float, out_max: float, value: float
) -> float:
    """
    Remap value from [in_min, in_max] onto [out_min, out_max].

    Raises:
        ZeroDivisionError: If in_min == in_max.
    """
    return lerp(out_min, out_max, (value - in_min) / (in_max - in_min))


def compose(f: Callable[[B], R], g: Callable[[A], B]) -> Callable[[A], R]:
    """Return x -> f(g(x))."""
    def composed(a: A) -> R:
        return f(g(a))
    return composed


def compose2(f: Callable[[B, B], R], g: Callable[[A], B]) -> Callable[[A, A], R]:
    """Return (a, b) -> f(g(a), g(b))."""
    def composed(a: A, b: A) -> R:
        return f(g(a), g(b))
    return composed


def compose3(
    f: Callable[[B, B, B], R], g: Callable[[A], B]
) -> Callable[[A, A, A], R]:
    def composed(a: A, b: A, c: A) -> R:
        return f(g(a), g(b), g(c))
    return composed


def compose4(
    f: Callable[[B, B, B, B], R], g: Callable[[A], B]
) -> Callable[[A, A, A, A], R]:
    def composed(a: A, b: A, c: A, d: A) -> R:
        return f(g(a), g(b), g(c), g(d))
    return composed


def compose5(
    f: Callable[[B, B, B, B, B], R], g: Callable[[A], B]
) -> Callable[[A, A, A, A, A], R]:
    def composed(a: A, b: A, c: A, d: A, e: A) -> R:
        return f(g(a), g(b), g(c), g(d), g(e))
    return composed
