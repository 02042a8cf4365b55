"""Exceptions raised by arrayx."""


class ArrayxError(Exception):
    """Base class for all arrayx errors."""


class ComparatorError(ArrayxError, TypeError):
    """A comparator returned something other than an Ordering or a real number."""

    def __init__(self, result: object):
        self.result = result
        super().__init__(
            f"Comparator must return an Ordering or a number, got {type(result).__name__}"
        )
