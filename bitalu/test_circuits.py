"""Combinational circuit truth tables."""

import itertools

import pytest

from .bit import Bit
from .circuits import (
    FullAdderResult,
    full_adder,
    full_adder_carry,
    full_adder_sum,
    full_subtractor,
    full_subtractor_borrow,
    full_subtractor_difference,
    half_adder,
    half_adder_carry,
    half_adder_sum,
    half_subtractor,
    half_subtractor_borrow,
    half_subtractor_difference,
)


@pytest.mark.parametrize("x,y", itertools.product((0, 1), repeat=2))
def test_half_adder(x, y):
    result = half_adder(Bit(x), Bit(y))
    total = x + y
    assert int(result.sum) == total & 1
    assert int(result.carry) == total >> 1


@pytest.mark.parametrize("x,y", itertools.product((0, 1), repeat=2))
def test_half_subtractor(x, y):
    result = half_subtractor(Bit(x), Bit(y))
    assert int(result.difference) == (x - y) & 1
    assert int(result.borrow) == int(x < y)


@pytest.mark.parametrize("x,y,c", itertools.product((0, 1), repeat=3))
def test_full_adder(x, y, c):
    result = full_adder(Bit(x), Bit(y), Bit(c))
    total = x + y + c
    assert int(result.sum) == total & 1, f"sum of {x}+{y}+{c}"
    assert int(result.carry) == total >> 1, f"carry of {x}+{y}+{c}"


@pytest.mark.parametrize("x,y,b", itertools.product((0, 1), repeat=3))
def test_full_subtractor(x, y, b):
    result = full_subtractor(Bit(x), Bit(y), Bit(b))
    assert int(result.difference) == (x - y - b) & 1, f"difference of {x}-{y}-{b}"
    assert int(result.borrow) == int(x - y - b < 0), f"borrow of {x}-{y}-{b}"


def test_results_are_named_tuples():
    result = full_adder(1, 1, 0)
    assert isinstance(result, FullAdderResult)
    total, carry = result
    assert not total and carry


@pytest.mark.parametrize("x,y", itertools.product((0, 1), repeat=2))
def test_half_cell_outputs_match_gates(x, y):
    assert int(half_adder_sum(x, y)) == (x + y) & 1
    assert int(half_adder_carry(x, y)) == (x + y) >> 1
    assert int(half_subtractor_difference(x, y)) == (x - y) & 1
    assert int(half_subtractor_borrow(x, y)) == int(x < y)
    assert half_adder(x, y) == (half_adder_sum(x, y), half_adder_carry(x, y))


@pytest.mark.parametrize("x,y,c", itertools.product((0, 1), repeat=3))
def test_full_cell_outputs_match_gates(x, y, c):
    assert int(full_adder_sum(x, y, c)) == (x + y + c) & 1
    assert int(full_adder_carry(x, y, c)) == (x + y + c) >> 1
    assert int(full_subtractor_difference(x, y, c)) == (x - y - c) & 1
    assert int(full_subtractor_borrow(x, y, c)) == int(x - y - c < 0)
    cell = full_subtractor(x, y, c)
    assert bool(cell.borrow) == bool(full_subtractor_borrow(x, y, c))
