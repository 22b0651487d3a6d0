"""Combinational circuits built from Bit gates.

Half and full adders/subtractors, the cells the ALU chains into ripple
carry and ripple borrow networks. All functions are pure: no state, no
native integer arithmetic, only gate operators on Bits.

Full cells are wired from two half cells and an OR gate:

    full_adder(x, y, c):
        s1, c1 = half_adder(x, y)
        s,  c2 = half_adder(s1, c)
        carry  = c1 | c2

    full_subtractor(x, y, b):
        d1, b1 = half_subtractor(x, y)
        d,  b2 = half_subtractor(d1, b)
        borrow = b1 | b2
"""

from typing import NamedTuple

from .bit import Bit


class HalfAdderResult(NamedTuple):
    sum: Bit
    carry: Bit


class FullAdderResult(NamedTuple):
    sum: Bit
    carry: Bit


class HalfSubtractorResult(NamedTuple):
    difference: Bit
    borrow: Bit


class FullSubtractorResult(NamedTuple):
    difference: Bit
    borrow: Bit


# Single-output gates. Each cell output is its own small network; the
# tuple-returning cells below wire them together.

def half_adder_sum(x, y):
    return Bit(x) ^ y


def half_adder_carry(x, y):
    return Bit(x) & y


def half_subtractor_difference(x, y):
    return Bit(x) ^ y


def half_subtractor_borrow(x, y):
    return ~Bit(x) & y


def full_adder_sum(x, y, c):
    return half_adder_sum(half_adder_sum(x, y), c)


def full_adder_carry(x, y, c):
    return half_adder_carry(x, y) | half_adder_carry(half_adder_sum(x, y), c)


def full_subtractor_difference(x, y, b):
    return half_subtractor_difference(half_subtractor_difference(x, y), b)


def full_subtractor_borrow(x, y, b):
    first = half_subtractor_difference(x, y)
    return half_subtractor_borrow(x, y) | half_subtractor_borrow(first, b)


# Cells

def half_adder(x, y):
    """Add two bits without carry-in.

     x  y | sum carry
    ------|-----------
     0  0 |  0    0
     0  1 |  1    0
     1  0 |  1    0
     1  1 |  0    1
    """
    return HalfAdderResult(sum=half_adder_sum(x, y), carry=half_adder_carry(x, y))


def half_subtractor(x, y):
    """Subtract y from x without borrow-in.

     x  y | difference borrow
    ------|-------------------
     0  0 |     0        0
     0  1 |     1        1
     1  0 |     1        0
     1  1 |     0        0
    """
    return HalfSubtractorResult(
        difference=half_subtractor_difference(x, y),
        borrow=half_subtractor_borrow(x, y),
    )


def full_adder(x, y, c):
    """Add two bits and a carry-in.

    sum = x ^ y ^ c, carry = (x & y) | ((x ^ y) & c)
    """
    return FullAdderResult(sum=full_adder_sum(x, y, c), carry=full_adder_carry(x, y, c))


def full_subtractor(x, y, b):
    """Subtract y and a borrow-in from x.

    difference = x ^ y ^ b, borrow = (~x & y) | (~(x ^ y) & b)
    """
    return FullSubtractorResult(
        difference=full_subtractor_difference(x, y, b),
        borrow=full_subtractor_borrow(x, y, b),
    )
