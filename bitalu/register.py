"""Fixed-width register of Bits."""

from .arch import ARCHITECTURE
from .bit import Bit, HIGH, LOW


class Register:
    """ARCHITECTURE-bit register holding a two's complement value.

    Bit 0 is the least significant bit and carries place value 2**0;
    bit ARCHITECTURE-1 is the sign bit. The register never changes length.

    Construction:
        Register()        all bits 0
        Register(value)   two's complement bits of ``value``; bits above
                          ARCHITECTURE are discarded, so Register(-1) and
                          Register(0xFFFF) hold the same pattern

    Access:
        reg[i]            read bit i (0 <= i < ARCHITECTURE)
        reg[i] = bit      write bit i
        reg.msb           sign bit
        reg.to_int(...)   integer view, see to_int()
        str(reg)          bits MSB first, e.g. "0000000000101010"

    Registers compare bit for bit. They are mutable and therefore not
    hashable. Arithmetic lives in the ALU, not here.
    """

    __slots__ = ("_bits",)

    def __init__(self, value=0):
        self._bits = [Bit(value >> i & 1) for i in range(ARCHITECTURE)]

    def _check_index(self, index):
        if not 0 <= index < ARCHITECTURE:
            raise IndexError(
                f"bit index {index} out of range for {ARCHITECTURE}-bit register"
            )

    def __getitem__(self, index):
        self._check_index(index)
        return self._bits[index]

    def __setitem__(self, index, bit):
        self._check_index(index)
        self._bits[index] = bit if isinstance(bit, Bit) else Bit(bit)

    def __len__(self):
        return ARCHITECTURE

    def __iter__(self):
        return iter(self._bits)

    @property
    def msb(self):
        return self._bits[ARCHITECTURE - 1]

    def to_int(self, width=ARCHITECTURE, signed=True):
        """Read the register as a ``width``-bit integer.

        The register bits land unchanged in the low ARCHITECTURE bits of the
        target and the upper bits stay 0, so the sign only shows when
        ``width == ARCHITECTURE``: a register holding -1 reads as -1 at
        width 16 but as 65535 at width 32.
        """
        if width < ARCHITECTURE:
            raise ValueError(
                f"width {width} cannot hold a {ARCHITECTURE}-bit register"
            )
        value = 0
        for i, bit in enumerate(self._bits):
            if bit:
                value |= 1 << i
        if signed and value >> (width - 1) & 1:
            value -= 1 << width
        return value

    def __int__(self):
        return self.to_int()

    def is_zero(self):
        """NOR across every bit: HIGH when the register holds 0."""
        zero = HIGH
        for bit in self._bits:
            zero = zero & ~bit
        return zero

    def clear(self):
        for i in range(ARCHITECTURE):
            self._bits[i] = LOW

    def copy(self):
        other = Register()
        other._bits = list(self._bits)
        return other

    def __eq__(self, other):
        if not isinstance(other, Register):
            return NotImplemented
        return all(bool(a == b) for a, b in zip(self._bits, other._bits))

    __hash__ = None

    def __str__(self):
        return "".join(str(bit) for bit in reversed(self._bits))

    def __repr__(self):
        return f"Register(0b{self})"
