"""bitalu register set.

A fixed block of same-width registers:
- REGISTER_COUNT registers by default, all ARCHITECTURE bits wide
- Registers are independent; writing one never touches another
- Zero-initialized on construction and on reset()
"""

from .arch import REGISTER_COUNT
from .register import Register


class RegisterFile:
    """Block of ``count`` independent registers.

    Registers are addressed by number (``regs[4]``) and also reachable by
    name (``regs.r4``). The block is allocated once; reset() zeroes every
    register in place so outstanding references stay valid.
    """

    def __init__(self, count=REGISTER_COUNT):
        if count < 1:
            raise ValueError(f"register set needs at least one register, got {count}")
        self._regs = [Register() for _ in range(count)]

    def __getitem__(self, index):
        return self._regs[index]

    def __len__(self):
        return len(self._regs)

    def __iter__(self):
        return iter(self._regs)

    def __getattr__(self, name):
        if name.startswith("r") and name[1:].isdigit():
            index = int(name[1:])
            if index < len(self._regs):
                return self._regs[index]
        raise AttributeError(name)

    def reset(self):
        for reg in self._regs:
            reg.clear()

    def dump(self):
        """Signed values of every register, in order."""
        return [int(reg) for reg in self._regs]
