"""
Arrayx: generic helpers for immutable indexed sequences.

Provides lookup, construction, parallel map/zip/unzip, safe folds and a
quicksort family over any Sequence, returning tuples. Numeric helpers and
composition combinators live alongside.

Usage:
    from arrayx import sort_by, map2, foldl_safe, range_map

    # Sort by a derived key
    sort_by(len, ["ccc", "a", "bb"])  # ("a", "bb", "ccc")

    # Pointwise combination, truncated to the shortest input
    map2(operator.add, [1, 2, 3], [10, 20])  # (11, 22)

    # Fold without an identity element
    foldl_safe(max, [])  # None
"""

from .arrays import (
    head, tail, is_empty, member, index_of, reverse,
    initialize, initialize2, initialize3,
    intersperse, concat, concat_map,
    map2, map3, map4, map5,
    zip, zip3, zip4, zip5,
    unzip, unzip3, unzip4, unzip5,
    foldl_safe, foldr_safe, sum, product, maximum, minimum,
    sort, sort_by, sort_with,
)
from .basics import (
    infinity, lerp, range_map, identity, compare,
    compose, compose2, compose3, compose4, compose5,
)
from .errors import ArrayxError, ComparatorError
from .logging import configure_logging, get_logger
from .ordering import Ordering, CompareFunc

__version__ = "0.1.0"
__all__ = [
    # Traversal & lookup
    "head",
    "tail",
    "is_empty",
    "member",
    "index_of",
    "reverse",
    # Construction
    "initialize",
    "initialize2",
    "initialize3",
    # Combination
    "intersperse",
    "concat",
    "concat_map",
    # Parallel combinators
    "map2",
    "map3",
    "map4",
    "map5",
    "zip",
    "zip3",
    "zip4",
    "zip5",
    "unzip",
    "unzip3",
    "unzip4",
    "unzip5",
    # Reduction
    "foldl_safe",
    "foldr_safe",
    "sum",
    "product",
    "maximum",
    "minimum",
    # Sorting
    "sort",
    "sort_by",
    "sort_with",
    "Ordering",
    "CompareFunc",
    # Basics
    "infinity",
    "lerp",
    "range_map",
    "identity",
    "compare",
    "compose",
    "compose2",
    "compose3",
    "compose4",
    "compose5",
    # Errors & logging
    "ArrayxError",
    "ComparatorError",
    "configure_logging",
    "get_logger",
]
