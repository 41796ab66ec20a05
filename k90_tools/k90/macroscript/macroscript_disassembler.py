#!/usr/bin/env python3
"""
K90 MacroInfo Disassembler

Disassembles a MacroInfo hex payload back to a human-readable listing.
"""

import re
from typing import List

from ..config.constants import OPCODE_HEX_WIDTH, PAD_UNIT
from .keys import key_name

DELAY_PREFIX = "ff"
STATE_DOWN = "0001"
STATE_UP = "0000"

_HEX_DIGITS = re.compile(r"[0-9a-f]*")


def disassemble(payload: str) -> List[str]:
    """Disassemble a MacroInfo payload to one line per opcode"""
    payload = payload.strip().lower()
    if _HEX_DIGITS.fullmatch(payload) is None:
        raise ValueError("MacroInfo payload is not a hex string")

    instructions = []
    pos = 0

    while pos < len(payload):
        address = pos // 2
        opcode = payload[pos : pos + OPCODE_HEX_WIDTH]

        if len(opcode) < OPCODE_HEX_WIDTH:
            instructions.append(f"0x{address:04X}: {opcode} (incomplete)")
            break

        # Key code 0 never appears in a compiled macro, so this is padding
        if opcode == PAD_UNIT:
            padding = len(payload[pos:]) // OPCODE_HEX_WIDTH
            instructions.append(f"0x{address:04X}: PADDING {padding}")
            break

        prefix, value = opcode[:2], opcode[2:]
        if prefix == DELAY_PREFIX:
            instructions.append(f"0x{address:04X}: DELAY {int(value, 16)}")
        elif value == STATE_DOWN:
            instructions.append(f"0x{address:04X}: KEYDOWN {key_name(int(prefix, 16))}")
        elif value == STATE_UP:
            instructions.append(f"0x{address:04X}: KEYUP {key_name(int(prefix, 16))}")
        else:
            instructions.append(f"0x{address:04X}: UNKNOWN_OPCODE {opcode}")

        pos += OPCODE_HEX_WIDTH

    return instructions
