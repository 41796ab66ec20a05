#!/usr/bin/env python3
"""
Tests for the MacroInfo disassembler
"""

import pytest

from .macroscript_compiler import compile_script
from .macroscript_disassembler import disassemble
from .macroscript_encoder import encode_events


def test_compiled_macro_listing() -> None:
    macro = compile_script(["down shift", "press a 40", "up shift"])

    assert disassemble(encode_events(macro.events)) == [
        "0x0000: KEYDOWN ShiftKey",
        "0x0003: DELAY 15",
        "0x0006: KEYDOWN A",
        "0x0009: DELAY 40",
        "0x000C: KEYUP A",
        "0x000F: DELAY 15",
        "0x0012: KEYUP ShiftKey",
        "0x0015: PADDING 1353",
    ]


def test_empty_payload() -> None:
    assert disassemble(encode_events([])) == ["0x0000: PADDING 1360"]
    assert disassemble("") == []


def test_unpadded_payload() -> None:
    assert disassemble("FF0064\n") == ["0x0000: DELAY 100"]


def test_unknown_and_incomplete_opcodes() -> None:
    assert disassemble("410002ff00") == [
        "0x0000: UNKNOWN_OPCODE 410002",
        "0x0003: ff00 (incomplete)",
    ]


def test_unnamed_key_code() -> None:
    assert disassemble("070001") == ["0x0000: KEYDOWN 0x07"]


def test_rejects_non_hex() -> None:
    with pytest.raises(ValueError):
        disassemble("41 0001")
    with pytest.raises(ValueError):
        disassemble("zz0000")
