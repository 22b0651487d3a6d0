"""bitalu ALU (Arithmetic Logic Unit).

Integer operations on Registers, built from full-adder chains, with
hardware-style condition flags.
"""

import logging
from typing import NamedTuple

from .arch import ARCHITECTURE, Flag
from .bit import HIGH, LOW
from .circuits import full_adder
from .lsu import mov

log = logging.getLogger(__name__)


class Flags(NamedTuple):
    """Snapshot of the four condition flags as plain booleans."""
    cf: bool
    zf: bool
    sf: bool
    of: bool


class ALU:
    """Arithmetic logic unit with its own flag register.

    Flags:
        cf: Carry out of the MSB, borrow for SUB/CMP, or the last bit
            shifted/rotated out
        zf: Result is all zeros
        sf: MSB of the result
        of: Signed (two's complement) overflow

    Every operation overwrites its first register operand in place (CMP
    only touches its scratch register). Scratch registers are passed in
    by the caller:
        temp: overwritten freely
        zero: must hold 0 and is only read
        quotient: DIV's counter, overwritten

    A scratch register must not alias a live operand, with one exception:
    the shifts and rotates accept ``temp is reg``.
    """

    def __init__(self):
        self.cf = LOW
        self.zf = LOW
        self.sf = LOW
        self.of = LOW

    @property
    def flags(self):
        return Flags(bool(self.cf), bool(self.zf), bool(self.sf), bool(self.of))

    @property
    def status(self):
        """Flags packed into a status word at the Flag bit positions."""
        return (int(self.cf) << Flag.C | int(self.zf) << Flag.Z |
                int(self.sf) << Flag.S | int(self.of) << Flag.O)

    def reset(self):
        self.cf = self.zf = self.sf = self.of = LOW

    # ------------------------------------------------------------ ripple chains
    def _ripple(self, lhs, rhs, carry, invert):
        """Run a full-adder chain lhs + (rhs or ~rhs) + carry into lhs.

        Sets ZF and SF from the result and returns the final carry.
        """
        for i in range(ARCHITECTURE):
            y = ~rhs[i] if invert else rhs[i]
            cell = full_adder(lhs[i], y, carry)
            lhs[i] = cell.sum
            carry = cell.carry
        self.zf = lhs.is_zero()
        self.sf = lhs.msb
        return carry

    def add(self, lhs, rhs):
        """lhs <- lhs + rhs.

        CF is the carry out of the MSB. OF is set when both operands share
        a sign and the result's sign differs from it.
        """
        lhs_sign = lhs.msb
        rhs_sign = rhs.msb
        self.cf = self._ripple(lhs, rhs, LOW, invert=False)
        self.of = (lhs_sign == rhs_sign) & (self.sf != lhs_sign)

    def sub(self, lhs, rhs):
        """lhs <- lhs - rhs, computed as lhs + ~rhs + 1.

        CF is the borrow (inverted carry out). OF is set when the operand
        signs differ and the result's sign differs from lhs's.
        """
        lhs_sign = lhs.msb
        rhs_sign = rhs.msb
        self.cf = ~self._ripple(lhs, rhs, HIGH, invert=True)
        self.of = (lhs_sign != rhs_sign) & (self.sf != lhs_sign)

    def cmp(self, lhs, rhs, temp):
        """Set the flags of lhs - rhs without modifying either operand."""
        mov(temp, lhs)
        self.sub(temp, rhs)

    def mul(self, lhs, rhs, temp, zero):
        """lhs <- lhs * rhs (low ARCHITECTURE bits) by shift-and-add.

        The flags are whatever the final ADD/SHL left behind; there is no
        multiply overflow detection. ``rhs`` must not be ``lhs``.
        """
        mov(temp, lhs)
        mov(lhs, zero)
        for i in range(ARCHITECTURE):
            if rhs[i]:
                self.add(lhs, temp)
            self.shl(temp, 1, zero, temp)

    def div(self, lhs, rhs, quotient, temp, zero):
        """lhs <- lhs // rhs by repeated subtraction, operands unsigned.

        Division by zero is reported through the flags only: the dividend
        is cleared and ZF, CF and OF are set with SF clear. Otherwise ZF
        and SF describe the quotient and CF, OF are cleared.
        """
        self.cmp(rhs, zero, temp)
        if self.zf:
            mov(lhs, zero)
            self.zf = self.cf = self.of = HIGH
            self.sf = LOW
            log.warning("DIV by zero: dividend cleared, ZF/CF/OF set")
            return

        mov(quotient, zero)
        mov(temp, lhs)
        while True:
            self.sub(temp, rhs)
            if self.cf:
                # Borrowed: undo the last subtraction
                self.add(temp, rhs)
                break
            self.inc(quotient)

        mov(lhs, quotient)
        self.cmp(lhs, zero, temp)
        self.cf = LOW
        self.of = LOW

    def inc(self, reg):
        """reg <- reg + 1. CF is not affected.

        The chain stops once the carry dies; the bits above cannot change.
        """
        sign_before = reg.msb
        carry = HIGH
        for i in range(ARCHITECTURE):
            cell = full_adder(reg[i], LOW, carry)
            reg[i] = cell.sum
            carry = cell.carry
            if not carry:
                break
        self.zf = reg.is_zero()
        self.sf = reg.msb
        self.of = ~sign_before & self.sf

    def dec(self, reg):
        """reg <- reg - 1, adding all ones (-1). CF is not affected.

        The chain stops once a carry appears: from there on every cell
        passes its input bit through with carry 1.
        """
        sign_before = reg.msb
        carry = LOW
        for i in range(ARCHITECTURE):
            cell = full_adder(reg[i], HIGH, carry)
            reg[i] = cell.sum
            carry = cell.carry
            if carry:
                break
        self.zf = reg.is_zero()
        self.sf = reg.msb
        self.of = sign_before & ~self.sf

    def neg(self, reg, temp, zero):
        """reg <- 0 - reg.

        CF is set for any non-zero operand. OF is set only when negating
        the minimum value, which maps to itself.
        """
        mov(temp, zero)
        self.sub(temp, reg)
        # 0 - x overflows exactly when x and the result are both negative
        overflow = self.of
        mov(reg, temp)
        self.cmp(reg, zero, temp)
        self.cf = ~self.zf
        self.of = overflow

    # ------------------------------------------------------------ shifts
    @staticmethod
    def _check_count(count):
        if count < 0:
            raise ValueError(f"shift/rotate count must be non-negative, got {count}")

    def _unchanged(self, reg, zero, temp):
        self.cmp(reg, zero, temp)
        self.cf = LOW
        self.of = LOW

    def shl(self, reg, count, zero, temp):
        """Logical shift left by ``count``, filling with 0.

        Counts of ARCHITECTURE or more clear the register and leave the
        original MSB in CF. OF = SF ^ CF for a 1-bit shift, else 0.
        """
        self._check_count(count)
        if count == 0:
            self._unchanged(reg, zero, temp)
            return
        if count >= ARCHITECTURE:
            carry = reg.msb
            mov(reg, zero)
        else:
            carry = reg[ARCHITECTURE - count]
            for i in reversed(range(ARCHITECTURE - count)):
                reg[i + count] = reg[i]
            for i in range(count):
                reg[i] = LOW
        self.cmp(reg, zero, temp)
        self.cf = carry
        self.of = self.sf ^ carry if count == 1 else LOW

    def shr(self, reg, count, zero, temp):
        """Logical shift right by ``count``, filling with 0. OF is always 0.

        Counts of ARCHITECTURE or more clear the register and leave the
        original LSB in CF.
        """
        self._check_count(count)
        if count == 0:
            self._unchanged(reg, zero, temp)
            return
        if count >= ARCHITECTURE:
            carry = reg[0]
            mov(reg, zero)
        else:
            carry = reg[count - 1]
            for i in range(ARCHITECTURE - count):
                reg[i] = reg[i + count]
            for i in range(ARCHITECTURE - count, ARCHITECTURE):
                reg[i] = LOW
        self.cmp(reg, zero, temp)
        self.cf = carry
        self.of = LOW

    def sar(self, reg, count, zero, temp):
        """Arithmetic shift right by ``count``, filling with the sign bit.

        Counts of ARCHITECTURE or more fill the register with the sign and
        leave the original LSB in CF. OF is always 0.
        """
        self._check_count(count)
        if count == 0:
            self._unchanged(reg, zero, temp)
            return
        sign = reg.msb
        if count >= ARCHITECTURE:
            carry = reg[0]
            for i in range(ARCHITECTURE):
                reg[i] = sign
        else:
            carry = reg[count - 1]
            for i in range(ARCHITECTURE - count):
                reg[i] = reg[i + count]
            for i in range(ARCHITECTURE - count, ARCHITECTURE):
                reg[i] = sign
        self.cmp(reg, zero, temp)
        self.cf = carry
        self.of = LOW

    def rol(self, reg, count, zero, temp):
        """Rotate left by ``count % ARCHITECTURE``, one position at a time.

        CF is the last bit rotated out of the MSB. OF = SF ^ CF for a net
        1-bit rotation, else 0.
        """
        self._check_count(count)
        count %= ARCHITECTURE
        if count == 0:
            self._unchanged(reg, zero, temp)
            return
        carry = LOW
        for _ in range(count):
            carry = reg.msb
            for i in range(ARCHITECTURE - 1, 0, -1):
                reg[i] = reg[i - 1]
            reg[0] = carry
        self.cmp(reg, zero, temp)
        self.cf = carry
        self.of = self.sf ^ carry if count == 1 else LOW

    def ror(self, reg, count, zero, temp):
        """Rotate right by ``count % ARCHITECTURE``, one position at a time.

        CF is the last bit rotated out of the LSB. For a net 1-bit rotation
        OF is the XOR of the two highest result bits, else 0.
        """
        self._check_count(count)
        count %= ARCHITECTURE
        if count == 0:
            self._unchanged(reg, zero, temp)
            return
        carry = LOW
        for _ in range(count):
            carry = reg[0]
            for i in range(ARCHITECTURE - 1):
                reg[i] = reg[i + 1]
            reg[ARCHITECTURE - 1] = carry
        self.cmp(reg, zero, temp)
        self.cf = carry
        if count == 1:
            self.of = reg[ARCHITECTURE - 1] ^ reg[ARCHITECTURE - 2]
        else:
            self.of = LOW

    # ------------------------------------------------------------ dispatch
    MNEMONICS = ("ADD", "SUB", "MUL", "DIV", "INC", "DEC", "NEG",
                 "SHL", "SHR", "SAR", "ROL", "ROR", "CMP")

    def execute(self, op, *operands):
        """Run the operation named by ``op`` on ``operands``.

        ``op`` is a mnemonic string in any case or an enum member whose
        name is one (ALUOp, ShiftOp). Operands are passed through in the
        order the matching method takes them.
        """
        name = str(getattr(op, "name", op)).upper()
        if name not in self.MNEMONICS:
            raise ValueError(f"unknown ALU operation {op!r}")
        getattr(self, name.lower())(*operands)
        log.debug("%s -> %s flags=%s", name, operands[0], self.flags)
        return self.flags
