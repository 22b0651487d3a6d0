"""bitalu demonstration CLI.

Run with: python -m bitalu ADD 5 3
          python -m bitalu ROL 0b1001 2 --trace
"""

import argparse
import logging
import sys

from .alu import ALU
from .lsu import load
from .regfile import RegisterFile

log = logging.getLogger(__name__)

BINARY = ("ADD", "SUB", "MUL", "DIV", "CMP")
UNARY = ("INC", "DEC", "NEG")
SHIFTS = ("SHL", "SHR", "SAR", "ROL", "ROR")


def parse_int(text):
    """Parse decimal, 0x hex or 0b binary literals with an optional sign."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bitalu",
        description="Run one ALU operation on 16-bit registers and show the flags.",
    )
    parser.add_argument("op", type=str.upper, choices=ALU.MNEMONICS,
                        help="operation mnemonic")
    parser.add_argument("a", type=parse_int, help="first operand (destination)")
    parser.add_argument("b", type=parse_int, nargs="?",
                        help="second operand, or the count for shifts/rotates")
    parser.add_argument("--trace", action="store_true",
                        help="log every ALU step at DEBUG level")
    return parser


def operands_for(op, regs, count):
    """Register operands for ``op``, laid out in a register set.

    r0 destination, r1 source, r2 temp, r3 quotient, last register zero.
    """
    lhs, rhs, temp, quotient = regs[0], regs[1], regs[2], regs[3]
    zero = regs[len(regs) - 1]

    if op in ("ADD", "SUB"):
        return (lhs, rhs)
    if op == "CMP":
        return (lhs, rhs, temp)
    if op == "MUL":
        return (lhs, rhs, temp, zero)
    if op == "DIV":
        return (lhs, rhs, quotient, temp, zero)
    if op in ("INC", "DEC"):
        return (lhs,)
    if op == "NEG":
        return (lhs, temp, zero)
    return (lhs, count, zero, temp)


def run(op, a, b=None, alu=None):
    """Execute ``op`` on fresh registers and return (regs, alu)."""
    alu = alu or ALU()
    regs = RegisterFile()
    load(regs[0], a)
    if b is not None and op in BINARY:
        load(regs[1], b)
    alu.execute(op, *operands_for(op, regs, b))
    return regs, alu


def format_register(label, reg):
    return f"  {label:<4} {reg}  ({int(reg)})"


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.op not in UNARY and args.b is None:
        parser.error(f"{args.op} needs a second operand")

    before = RegisterFile(2)
    load(before[0], args.a)
    if args.op in BINARY:
        load(before[1], args.b)

    try:
        regs, alu = run(args.op, args.a, args.b)
    except ValueError as e:
        parser.error(str(e))

    print("=" * 60)
    if args.op in SHIFTS:
        print(f"{args.op} by {args.b}")
    else:
        print(args.op)
    print("=" * 60)
    print(format_register("A", before[0]))
    if args.op in BINARY:
        print(format_register("B", before[1]))
    print(format_register("A'", regs[0]))

    flags = alu.flags
    print(f"  CF={flags.cf:d} ZF={flags.zf:d} SF={flags.sf:d} OF={flags.of:d}")
    if args.op == "DIV" and flags.zf and flags.cf and flags.of:
        print("  division by zero")

    log.debug("status word 0x%04X", alu.status)
    log.debug("registers %s", regs.dump())
    return 0


if __name__ == "__main__":
    sys.exit(main())
