"""Tests for numeric helpers and composition combinators."""

import math
import operator
import pytest
from arrayx import (
    infinity, lerp, range_map, identity, compare,
    compose, compose2, compose3, compose4, compose5,
    Ordering,
)


class TestNumeric:
    def test_infinity(self):
        assert infinity == math.inf
        assert infinity > 1e308
        assert -infinity < -1e308

    def test_lerp_endpoints(self):
        assert lerp(2, 10, 0) == 2
        assert lerp(2, 10, 1) == 10
        assert lerp(2, 10, 0.5) == 6

    def test_lerp_extrapolates(self):
        assert lerp(0, 10, 2) == 20
        assert lerp(0, 10, -1) == -10

    def test_range_map(self):
        assert range_map(0, 10, 0, 100, 5) == 50
        assert range_map(0, 10, 100, 200, 10) == 200
        assert range_map(-1, 1, 0, 10, 0) == 5

    def test_range_map_inverted_output(self):
        assert range_map(0, 1, 1, 0, 0.25) == 0.75

    def test_range_map_degenerate_input(self):
        with pytest.raises(ZeroDivisionError):
            range_map(3, 3, 0, 1, 3)


class TestCompare:
    def test_compare(self):
        assert compare(1, 2) is Ordering.LESS
        assert compare(2, 1) is Ordering.GREATER
        assert compare(2, 2) is Ordering.EQUAL

    def test_compare_strings(self):
        assert compare("a", "b") is Ordering.LESS

    def test_identity(self):
        obj = object()
        assert identity(obj) is obj


class TestCompose:
    def test_compose(self):
        assert compose(str, abs)(-3) == "3"

    def test_compose_order(self):
        assert compose(lambda x: x + 1, lambda x: x * 2)(5) == 11

    def test_compose2(self):
        by_length = compose2(compare, len)
        assert by_length("ab", "abc") is Ordering.LESS
        assert compose2(operator.sub, abs)(-5, 3) == 2

    def test_compose3(self):
        assert compose3(lambda a, b, c: (a, b, c), str)(1, 2, 3) == ("1", "2", "3")

    def test_compose4(self):
        assert compose4(lambda *xs: sum(xs), abs)(-1, -2, 3, -4) == 10

    def test_compose5(self):
        double = lambda x: x * 2
        assert compose5(lambda *xs: xs, double)(1, 2, 3, 4, 5) == (2, 4, 6, 8, 10)

    def test_transform_applied_once_per_argument(self):
        calls = []

        def record(x):
            calls.append(x)
            return x

        compose3(lambda a, b, c: None, record)("a", "b", "c")
        assert calls == ["a", "b", "c"]
