"""Register, register set and load/store tests."""

import pytest

from .arch import ARCHITECTURE, INT_MAX, INT_MIN, REGISTER_COUNT
from .bit import Bit, HIGH, LOW
from .lsu import load, mov
from .regfile import RegisterFile
from .register import Register


def test_zero_initialized():
    reg = Register()
    assert len(reg) == ARCHITECTURE
    assert all(not bit for bit in reg)
    assert int(reg) == 0
    assert reg.is_zero()


@pytest.mark.parametrize("value", [0, 1, 42, -1, -42, INT_MAX, INT_MIN])
def test_signed_value(value):
    assert int(Register(value)) == value


def test_bit_order_lsb_first():
    reg = Register(0b1001)
    assert bool(reg[0]) and bool(reg[3])
    assert not reg[1] and not reg[2]
    assert str(reg) == "0" * (ARCHITECTURE - 4) + "1001"


def test_high_bits_discarded():
    assert Register(1 << ARCHITECTURE) == Register(0)
    assert Register((1 << ARCHITECTURE) + 5) == Register(5)
    assert Register(0xFFFF) == Register(-1)


def test_msb_is_sign():
    assert bool(Register(-1).msb)
    assert bool(Register(INT_MIN).msb)
    assert not Register(INT_MAX).msb


def test_to_int_widths():
    reg = Register(-1)
    assert reg.to_int() == -1
    assert reg.to_int(signed=False) == 0xFFFF
    # Bits map directly; a wider target does not sign-extend
    assert reg.to_int(width=32) == 0xFFFF
    assert reg.to_int(width=32, signed=False) == 0xFFFF
    assert Register(42).to_int(width=64) == 42


def test_to_int_rejects_narrow_width():
    with pytest.raises(ValueError):
        Register(1).to_int(width=ARCHITECTURE - 1)


def test_bit_write():
    reg = Register()
    reg[ARCHITECTURE - 1] = HIGH
    reg[0] = 1
    assert int(reg) == INT_MIN + 1
    reg[0] = LOW
    assert int(reg) == INT_MIN


@pytest.mark.parametrize("index", [-1, ARCHITECTURE, ARCHITECTURE + 3])
def test_index_out_of_range(index):
    reg = Register()
    with pytest.raises(IndexError):
        reg[index]
    with pytest.raises(IndexError):
        reg[index] = HIGH


def test_equality_and_copy():
    a = Register(1234)
    b = a.copy()
    assert a == b
    assert a is not b
    b[0] = HIGH
    assert a != b
    assert int(a) == 1234
    assert a != 1234


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Register())


def test_clear():
    reg = Register(-5)
    reg.clear()
    assert reg == Register()


def test_repr_round_trips_bit_pattern():
    reg = Register(-3)
    assert repr(reg) == f"Register(0b{reg})"
    assert Register(int(str(reg), 2)) == reg


def test_mov_copies_bits():
    src = Register(-7)
    dst = Register(99)
    mov(dst, src)
    assert dst == src
    dst[0] = LOW
    assert int(src) == -7


def test_load_encodes_twos_complement():
    reg = Register()
    load(reg, -2)
    assert str(reg) == "1" * (ARCHITECTURE - 1) + "0"
    load(reg, 0x1_0003)
    assert int(reg) == 3


def test_register_file_independent():
    regs = RegisterFile()
    assert len(regs) == REGISTER_COUNT
    load(regs[4], 0x1234)
    assert regs.r4 is regs[4]
    assert regs.dump()[4] == 0x1234
    assert all(value == 0 for i, value in enumerate(regs.dump()) if i != 4)


def test_register_file_reset_keeps_identity():
    regs = RegisterFile(4)
    r1 = regs[1]
    load(r1, -1)
    regs.reset()
    assert regs[1] is r1
    assert regs.dump() == [0, 0, 0, 0]


def test_register_file_bad_name():
    regs = RegisterFile(2)
    with pytest.raises(AttributeError):
        regs.r7
    with pytest.raises(ValueError):
        RegisterFile(0)


def test_is_zero_is_a_gate_output():
    assert isinstance(Register().is_zero(), Bit)
    assert bool(Register().is_zero())
    assert not Register(INT_MIN).is_zero()
    assert not Register(1).is_zero()
