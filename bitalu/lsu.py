"""Load/store helper.

Moves bit patterns between registers and loads integer literals. No
arithmetic happens here.
"""

from .arch import ARCHITECTURE
from .bit import Bit


def mov(dst, src):
    """Copy every bit of ``src`` into ``dst``."""
    for i in range(ARCHITECTURE):
        dst[i] = src[i]


def load(reg, value):
    """Write the two's complement bit pattern of ``value`` into ``reg``."""
    for i in range(ARCHITECTURE):
        reg[i] = Bit(value >> i & 1)
