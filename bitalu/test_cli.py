"""Demonstration CLI tests."""

import logging

import pytest

from .__main__ import main, parse_int, run


def test_add(capsys):
    assert main(["add", "5", "3"]) == 0
    out = capsys.readouterr().out
    assert "ADD" in out
    assert "0000000000001000  (8)" in out
    assert "CF=0 ZF=0 SF=0 OF=0" in out


def test_rol_binary_literal(capsys):
    assert main(["ROL", "0b1001", "2"]) == 0
    out = capsys.readouterr().out
    assert "ROL by 2" in out
    assert "(36)" in out


def test_div_by_zero_reported(capsys):
    assert main(["div", "42", "0"]) == 0
    out = capsys.readouterr().out
    assert "CF=1 ZF=1 SF=0 OF=1" in out
    assert "division by zero" in out


def test_unary_needs_one_operand(capsys):
    assert main(["neg", "-32768"]) == 0
    out = capsys.readouterr().out
    assert "(-32768)" in out
    assert "OF=1" in out


def test_missing_operand_exits():
    with pytest.raises(SystemExit) as exc:
        main(["sub", "1"])
    assert exc.value.code == 2


def test_negative_count_exits():
    with pytest.raises(SystemExit) as exc:
        main(["shl", "1", "-2"])
    assert exc.value.code == 2


def test_unknown_op_exits():
    with pytest.raises(SystemExit):
        main(["xor", "1", "2"])


def test_run_lays_out_registers():
    regs, alu = run("MUL", 6, 7)
    assert int(regs[0]) == 42
    assert int(regs[1]) == 7
    assert regs[len(regs) - 1].is_zero()


def test_parse_int():
    assert parse_int("0x10") == 16
    assert parse_int("-0b11") == -3
    assert parse_int("42") == 42


def test_trace_logs_register_dump(caplog, capsys):
    with caplog.at_level(logging.DEBUG, logger="bitalu.__main__"):
        assert main(["add", "5", "3", "--trace"]) == 0
    assert "registers [8, 3, 0" in caplog.text
    assert "status word 0x0000" in caplog.text
