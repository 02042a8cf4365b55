"""Three-way comparison results and comparator types."""

from __future__ import annotations
from decimal import Decimal
from enum import IntEnum
import numbers
from typing import TypeVar, Callable, Union

from .errors import ComparatorError

T = TypeVar("T")


class Ordering(IntEnum):
    """
    Result of a three-way comparison.

    Members are ints, so an Ordering can be used anywhere the usual
    negative / zero / positive comparator convention is expected.
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, result: object) -> Ordering:
        """
        Normalize a comparator result.

        Args:
            result: An Ordering, or a real number (int, float, Fraction,
                Decimal, ...) where only the sign matters.

        Raises:
            ComparatorError: If result is not an Ordering or a real number. bool
                is rejected even though it is an int.
        """
        if isinstance(result, cls):
            return result
        if isinstance(result, bool) or not isinstance(result, (numbers.Real, Decimal)):
            raise ComparatorError(result)
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        """Swap LESS and GREATER, leaving EQUAL alone."""
        return Ordering(-self.value)


CompareFunc = Callable[[T, T], Union[Ordering, int, float]]
