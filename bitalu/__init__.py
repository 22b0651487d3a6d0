"""bitalu: gate-level ALU simulator."""

from .arch import ARCHITECTURE, REGISTER_COUNT, INT_MIN, INT_MAX, Flag
from .bit import Bit, LOW, HIGH
from .circuits import (
    half_adder, full_adder, half_subtractor, full_subtractor,
    half_adder_sum, half_adder_carry,
    half_subtractor_difference, half_subtractor_borrow,
    full_adder_sum, full_adder_carry,
    full_subtractor_difference, full_subtractor_borrow,
)
from .register import Register
from .regfile import RegisterFile
from .lsu import mov, load
from .alu import ALU, Flags
from .reference import ALUOp, ShiftOp, ReferenceALU, ReferenceShifter
