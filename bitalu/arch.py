"""bitalu architecture constants."""

from enum import IntEnum

# Register width in bits
ARCHITECTURE = 16

# Registers in a register set
REGISTER_COUNT = 16

INT_MIN = -(1 << (ARCHITECTURE - 1))
INT_MAX = (1 << (ARCHITECTURE - 1)) - 1


# Flag bit positions in the packed status word
class Flag(IntEnum):
    C = 0   # Carry / borrow
    Z = 6   # Zero
    S = 7   # Sign
    O = 11  # Overflow
