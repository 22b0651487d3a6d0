"""Single-bit logic value."""


class Bit:
    """One logic signal, 0 or 1.

    Every gate returns a new Bit, so expressions read like the gate network
    they describe:

        ~x          NOT
        x & y       AND
        x | y       OR
        x ^ y       XOR
        x.xnor(y)   XNOR
        x.nand(y)   NAND
        x.nor(y)    NOR
        x == y      equality (XNOR)
        x != y      inequality (XOR)

    Operands that are not Bits are converted with bool(), so ``x & 1`` and
    ``x == True`` work as expected.
    """

    __slots__ = ("_value",)

    def __init__(self, value=False):
        self._value = bool(value)

    @staticmethod
    def _wire(other):
        return other if isinstance(other, Bit) else Bit(other)

    def __bool__(self):
        return self._value

    def __int__(self):
        return int(self._value)

    def __invert__(self):
        return Bit(not self._value)

    def __and__(self, other):
        return Bit(self._value and self._wire(other)._value)

    def __or__(self, other):
        return Bit(self._value or self._wire(other)._value)

    def __xor__(self, other):
        return Bit(self._value != self._wire(other)._value)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def xnor(self, other):
        return ~(self ^ other)

    def nand(self, other):
        return ~(self & other)

    def nor(self, other):
        return ~(self | other)

    def __eq__(self, other):
        return self.xnor(other)

    def __ne__(self, other):
        return self ^ other

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"Bit({int(self._value)})"

    def __str__(self):
        return "1" if self._value else "0"


LOW = Bit(False)
HIGH = Bit(True)
