"""bitalu reference RTL.

The same operations described in amaranth with native HDL arithmetic.
These modules are an independent oracle for the gate-level simulator:
tests drive them with amaranth.sim and compare results and flags.
"""

from amaranth import *
from amaranth.lib.enum import Enum

from .arch import ARCHITECTURE


class ALUOp(Enum, shape=4):
    """Reference ALU operation codes."""
    ADD = 0x0
    SUB = 0x1
    CMP = 0x2  # Flags of SUB, result passes A through
    INC = 0x3
    DEC = 0x4
    NEG = 0x5  # Negate A
    MUL = 0x6  # Low half of the product, flags not modelled
    DIV = 0x7  # Unsigned divide


class ShiftOp(Enum, shape=3):
    """Reference shifter operation codes."""
    SHL = 0x0  # Shift left logical
    SHR = 0x1  # Shift right logical
    SAR = 0x2  # Shift right arithmetic
    ROL = 0x3  # Rotate left
    ROR = 0x4  # Rotate right


class HalfAdderCell(Elaboratable):
    """One-bit half adder.

    Inputs: x, y
    Outputs: sum, carry
    """

    def __init__(self):
        self.x = Signal()
        self.y = Signal()
        self.sum = Signal()
        self.carry = Signal()

    def elaborate(self, platform):
        m = Module()
        m.d.comb += [
            self.sum.eq(self.x ^ self.y),
            self.carry.eq(self.x & self.y),
        ]
        return m


class FullAdderCell(Elaboratable):
    """One-bit full adder wired from two half adders.

    Inputs: x, y, c
    Outputs: sum, carry
    """

    def __init__(self):
        self.x = Signal()
        self.y = Signal()
        self.c = Signal()
        self.sum = Signal()
        self.carry = Signal()

    def elaborate(self, platform):
        m = Module()

        m.submodules.first = first = HalfAdderCell()
        m.submodules.second = second = HalfAdderCell()

        m.d.comb += [
            first.x.eq(self.x),
            first.y.eq(self.y),
            second.x.eq(first.sum),
            second.y.eq(self.c),
            self.sum.eq(second.sum),
            self.carry.eq(first.carry | second.carry),
        ]
        return m


class HalfSubtractorCell(Elaboratable):
    """One-bit half subtractor.

    Inputs: x, y
    Outputs: difference, borrow
    """

    def __init__(self):
        self.x = Signal()
        self.y = Signal()
        self.difference = Signal()
        self.borrow = Signal()

    def elaborate(self, platform):
        m = Module()
        m.d.comb += [
            self.difference.eq(self.x ^ self.y),
            self.borrow.eq(~self.x & self.y),
        ]
        return m


class FullSubtractorCell(Elaboratable):
    """One-bit full subtractor wired from two half subtractors.

    Inputs: x, y, b
    Outputs: difference, borrow
    """

    def __init__(self):
        self.x = Signal()
        self.y = Signal()
        self.b = Signal()
        self.difference = Signal()
        self.borrow = Signal()

    def elaborate(self, platform):
        m = Module()

        m.submodules.first = first = HalfSubtractorCell()
        m.submodules.second = second = HalfSubtractorCell()

        m.d.comb += [
            first.x.eq(self.x),
            first.y.eq(self.y),
            second.x.eq(first.difference),
            second.y.eq(self.b),
            self.difference.eq(second.difference),
            self.borrow.eq(first.borrow | second.borrow),
        ]
        return m


class ReferenceALU(Elaboratable):
    """Combinational reference ALU.

    Inputs:
        a: First operand (width bits)
        b: Second operand (width bits)
        op: ALU operation

    Outputs:
        result: Result (width bits)
        flag_c: Carry (ADD), borrow (SUB/CMP), non-zero operand (NEG)
        flag_z: Zero flag
        flag_s: Sign flag (result MSB)
        flag_o: Signed overflow flag

    INC and DEC leave flag_c at 0; the simulator keeps the previous CF
    for them, so callers compare only Z, S and O there.
    """

    def __init__(self, width=ARCHITECTURE):
        self.width = width

        # Inputs
        self.a = Signal(width)
        self.b = Signal(width)
        self.op = Signal(ALUOp)

        # Outputs
        self.result = Signal(width)
        self.flag_c = Signal()
        self.flag_z = Signal()
        self.flag_s = Signal()
        self.flag_o = Signal()

    def elaborate(self, platform):
        m = Module()
        w = self.width

        # Extended value for carry/borrow detection
        value = Signal(w + 1)

        with m.Switch(self.op):
            with m.Case(ALUOp.ADD):
                m.d.comb += value.eq(self.a + self.b)

            with m.Case(ALUOp.SUB, ALUOp.CMP):
                m.d.comb += value.eq(self.a - self.b)

            with m.Case(ALUOp.INC):
                m.d.comb += value.eq(self.a + 1)

            with m.Case(ALUOp.DEC):
                m.d.comb += value.eq(self.a - 1)

            with m.Case(ALUOp.NEG):
                m.d.comb += value.eq(0 - self.a)

            with m.Case(ALUOp.MUL):
                m.d.comb += value.eq((self.a * self.b)[:w])

            with m.Case(ALUOp.DIV):
                with m.If(self.b != 0):
                    m.d.comb += value.eq(self.a // self.b)

        with m.If(self.op == ALUOp.CMP):
            m.d.comb += self.result.eq(self.a)
        with m.Else():
            m.d.comb += self.result.eq(value[:w])

        a_sign = self.a[w - 1]
        b_sign = self.b[w - 1]
        r_sign = value[w - 1]

        m.d.comb += [
            self.flag_z.eq(value[:w] == 0),
            self.flag_s.eq(r_sign),
        ]

        with m.Switch(self.op):
            with m.Case(ALUOp.ADD):
                # Signs of a and b match but result differs
                m.d.comb += [
                    self.flag_c.eq(value[w]),
                    self.flag_o.eq((a_sign == b_sign) & (a_sign != r_sign)),
                ]
            with m.Case(ALUOp.SUB, ALUOp.CMP):
                # Signs of a and b differ and result sign != a sign
                m.d.comb += [
                    self.flag_c.eq(value[w]),
                    self.flag_o.eq((a_sign != b_sign) & (r_sign != a_sign)),
                ]
            with m.Case(ALUOp.INC):
                m.d.comb += self.flag_o.eq(~a_sign & r_sign)
            with m.Case(ALUOp.DEC):
                m.d.comb += self.flag_o.eq(a_sign & ~r_sign)
            with m.Case(ALUOp.NEG):
                m.d.comb += [
                    self.flag_c.eq(self.a != 0),
                    self.flag_o.eq(a_sign & r_sign),
                ]
            with m.Case(ALUOp.DIV):
                with m.If(self.b == 0):
                    # Divide by zero: Z, C and O set, S clear
                    m.d.comb += [
                        self.flag_z.eq(1),
                        self.flag_c.eq(1),
                        self.flag_o.eq(1),
                        self.flag_s.eq(0),
                    ]

        return m


class ReferenceShifter(Elaboratable):
    """Barrel shifter for shift/rotate operations.

    Inputs:
        value: Operand (width bits)
        op: Shift operation
        amount: Shift/rotate distance, 0 to width-1

    Outputs:
        result: Shifted value
        carry_out: Last bit shifted or rotated out (0 for amount 0)
    """

    def __init__(self, width=ARCHITECTURE):
        self.width = width

        self.value = Signal(width)
        self.op = Signal(ShiftOp)
        self.amount = Signal(range(width))

        self.result = Signal(width)
        self.carry_out = Signal()

    def elaborate(self, platform):
        m = Module()

        v = self.value
        w = self.width

        with m.Switch(self.op):
            with m.Case(ShiftOp.SHL):
                with m.Switch(self.amount):
                    for k in range(1, w):
                        with m.Case(k):
                            m.d.comb += [
                                self.result.eq(v << k),
                                self.carry_out.eq(v[w - k]),
                            ]
                    with m.Default():
                        m.d.comb += self.result.eq(v)

            with m.Case(ShiftOp.SHR):
                with m.Switch(self.amount):
                    for k in range(1, w):
                        with m.Case(k):
                            m.d.comb += [
                                self.result.eq(v >> k),
                                self.carry_out.eq(v[k - 1]),
                            ]
                    with m.Default():
                        m.d.comb += self.result.eq(v)

            with m.Case(ShiftOp.SAR):
                with m.Switch(self.amount):
                    for k in range(1, w):
                        with m.Case(k):
                            m.d.comb += [
                                self.result.eq(v.as_signed() >> k),
                                self.carry_out.eq(v[k - 1]),
                            ]
                    with m.Default():
                        m.d.comb += self.result.eq(v)

            with m.Case(ShiftOp.ROL):
                with m.Switch(self.amount):
                    for k in range(1, w):
                        with m.Case(k):
                            m.d.comb += [
                                self.result.eq(v.rotate_left(k)),
                                self.carry_out.eq(v[w - k]),
                            ]
                    with m.Default():
                        m.d.comb += self.result.eq(v)

            with m.Case(ShiftOp.ROR):
                with m.Switch(self.amount):
                    for k in range(1, w):
                        with m.Case(k):
                            m.d.comb += [
                                self.result.eq(v.rotate_right(k)),
                                self.carry_out.eq(v[k - 1]),
                            ]
                    with m.Default():
                        m.d.comb += self.result.eq(v)

            with m.Default():
                m.d.comb += [
                    self.result.eq(v),
                    self.carry_out.eq(0),
                ]

        return m
